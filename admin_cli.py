"""
Realty API - CLI Admin
Ferramenta de linha de comando para consultar e popular a API

Uso:
    python admin_cli.py teams list
    python admin_cli.py teams create "Equipe de Vendas" Brokers
    python admin_cli.py members list [team_id]
    python admin_cli.py members create <team_id> "Nome" "email" "telefone" [leader]
    python admin_cli.py regions list
    python admin_cli.py neighborhoods list [cidade]
    python admin_cli.py seed

Variáveis de ambiente:
    REALTY_API_URL  (padrão http://localhost:3000)
    API_KEY         chave enviada no header X-API-KEY
"""
import os
import sys
import httpx

BASE_URL = os.getenv("REALTY_API_URL", "http://localhost:3000")

SEED_TEAMS = [
    {"name": "Equipe de Vendas", "team_type": "Brokers"},
    {"name": "Equipe de Cadastro", "team_type": "Registration"},
    {"name": "Equipe Jurídica", "team_type": "Legal"},
    {"name": "Equipe de Atendimento", "team_type": "Support"},
    {"name": "Equipe Administrativa", "team_type": "Administrative"},
]

# (equipe, nome, email, telefone, líder)
SEED_MEMBERS = [
    ("Equipe de Vendas", "Ricardo Oliveira", "ricardo.oliveira@exemplo.com", "+5511987654321", True),
    ("Equipe de Vendas", "Amanda Silva", "amanda.silva@exemplo.com", "+5511976543210", False),
    ("Equipe de Cadastro", "Juliana Costa", "juliana.costa@exemplo.com", "+5511954321098", True),
    ("Equipe Jurídica", "Fernando Lima", "fernando.lima@exemplo.com", "+5511943210987", True),
    ("Equipe de Atendimento", "Patrícia Souza", "patricia.souza@exemplo.com", "+5511932109876", True),
    ("Equipe Administrativa", "Carlos Mendes", "carlos.mendes@exemplo.com", "+5511921098765", True),
]

SEED_CITY = "São Paulo"
SEED_REGIONS = {
    "Zona Sul": ["Moema", "Vila Mariana", "Campo Belo"],
    "Zona Oeste": ["Pinheiros", "Perdizes", "Lapa"],
}


class CLIError(Exception):
    """Resposta de erro da API"""


def get_client() -> httpx.Client:
    api_key = os.getenv("API_KEY")
    if not api_key:
        print("Erro: defina a variável de ambiente API_KEY")
        sys.exit(1)
    return httpx.Client(base_url=BASE_URL, headers={"X-API-KEY": api_key}, timeout=10.0)


def _data(response: httpx.Response):
    """Extrai `data` do envelope ou levanta CLIError com a mensagem da API"""
    body = response.json()
    if not body.get("success"):
        error = body.get("error", {})
        raise CLIError(f"{error.get('code', response.status_code)}: {error.get('message', response.text)}")
    return body.get("data")


def cmd_teams_list(client: httpx.Client):
    """Lista equipes"""
    teams = _data(client.get("/api/teams"))
    print(f"\n{'='*70}")
    print(f"{'ID':<36} | {'Nome':<20} | {'Tipo':<10}")
    print(f"{'='*70}")
    for t in teams:
        print(f"{t['id']:<36} | {t['name'][:20]:<20} | {t['team_type']:<10}")
    print(f"\nTotal: {len(teams)} equipes")
    return teams


def cmd_teams_create(client: httpx.Client, name: str, team_type: str):
    """Cria equipe"""
    team = _data(client.post("/api/teams", json={"name": name, "team_type": team_type}))
    print(f"\n✓ Equipe criada!")
    print(f"  ID: {team['id']}")
    print(f"  Nome: {team['name']}")
    print(f"  Tipo: {team['team_type']}")
    return team


def cmd_members_list(client: httpx.Client, team_id: str = None):
    """Lista membros"""
    params = {"team_id": team_id} if team_id else None
    members = _data(client.get("/api/members", params=params))
    print(f"\n{'='*80}")
    print(f"{'ID':<36} | {'Nome':<20} | {'Líder':<5} | {'Ativo':<5}")
    print(f"{'='*80}")
    for m in members:
        leader = "sim" if m["is_leader"] else "não"
        active = "sim" if m["active"] else "não"
        print(f"{m['id']:<36} | {m['name'][:20]:<20} | {leader:<5} | {active:<5}")
    print(f"\nTotal: {len(members)} membros")
    return members


def cmd_members_create(client: httpx.Client, team_id: str, name: str, email: str, phone: str, is_leader: bool = False):
    """Cria membro"""
    member = _data(client.post("/api/members", json={
        "name": name,
        "email": email,
        "phone": phone,
        "is_leader": is_leader,
        "team_id": team_id
    }))
    print(f"\n✓ Membro criado!")
    print(f"  ID: {member['id']}")
    print(f"  Nome: {member['name']}")
    print(f"  Líder: {'sim' if member['is_leader'] else 'não'}")
    return member


def cmd_regions_list(client: httpx.Client):
    """Lista regiões com seus bairros"""
    regions = _data(client.get("/api/regions", params={"include_neighborhoods": "true"}))
    for r in regions:
        names = ", ".join(n["name"] for n in r.get("neighborhoods", [])) or "-"
        print(f"  {r['name']:<20} | {names}")
    print(f"\nTotal: {len(regions)} regiões")
    return regions


def cmd_neighborhoods_list(client: httpx.Client, city: str = None):
    """Lista bairros"""
    params = {"city": city} if city else None
    neighborhoods = _data(client.get("/api/neighborhoods", params=params))
    for n in neighborhoods:
        print(f"  {n['id'][:8]}... | {n['name']:<20} | {n['city']}")
    print(f"\nTotal: {len(neighborhoods)} bairros")
    return neighborhoods


def cmd_seed(client: httpx.Client):
    """Popula equipes, membros, bairros e regiões de exemplo"""
    team_ids = {}
    for team in SEED_TEAMS:
        created = _data(client.post("/api/teams", json=team))
        team_ids[created["name"]] = created["id"]
        print(f"✓ Equipe: {created['name']}")

    for team_name, name, email, phone, is_leader in SEED_MEMBERS:
        _data(client.post("/api/members", json={
            "name": name,
            "email": email,
            "phone": phone,
            "is_leader": is_leader,
            "team_id": team_ids[team_name]
        }))
        print(f"✓ Membro: {name}")

    all_names = [name for names in SEED_REGIONS.values() for name in names]
    neighborhoods = _data(client.post("/api/neighborhoods/batch", json={
        "city": SEED_CITY,
        "neighborhoods": all_names
    }))
    neighborhood_ids = {n["name"]: n["id"] for n in neighborhoods}
    print(f"✓ {len(neighborhoods)} bairros em {SEED_CITY}")

    for region_name, names in SEED_REGIONS.items():
        _data(client.post("/api/regions", json={
            "name": region_name,
            "neighborhood_ids": [neighborhood_ids[n] for n in names]
        }))
        print(f"✓ Região: {region_name}")

    return {"teams": len(team_ids), "members": len(SEED_MEMBERS), "neighborhoods": len(neighborhoods)}


def print_help():
    print("""
Realty API - CLI Admin
======================

Comandos disponíveis:

  python admin_cli.py teams list                         - Listar equipes
  python admin_cli.py teams create "Nome" <tipo>         - Criar equipe
                                                           Tipos: Brokers, Registration, Legal,
                                                                  Support, Administrative

  python admin_cli.py members list [team_id]             - Listar membros
  python admin_cli.py members create <team_id> "Nome" "email" "telefone" [leader]
                                                         - Criar membro

  python admin_cli.py regions list                       - Listar regiões
  python admin_cli.py neighborhoods list [cidade]        - Listar bairros

  python admin_cli.py seed                               - Popular dados de exemplo

Exemplos:
  python admin_cli.py teams create "Equipe de Vendas" Brokers
  python admin_cli.py members create abc123-uuid "Ana Souza" "ana@exemplo.com" "+5511999990000" leader
""")


def _resolve(argv):
    """Mapeia argv para (comando, argumentos) ou None"""
    cmd = argv[1].lower()
    sub = argv[2] if len(argv) > 2 else None

    if cmd == "teams" and sub == "list":
        return cmd_teams_list, ()
    if cmd == "teams" and sub == "create" and len(argv) >= 5:
        return cmd_teams_create, (argv[3], argv[4])
    if cmd == "members" and sub == "list":
        return cmd_members_list, (argv[3] if len(argv) > 3 else None,)
    if cmd == "members" and sub == "create" and len(argv) >= 7:
        is_leader = len(argv) > 7 and argv[7].lower() == "leader"
        return cmd_members_create, (argv[3], argv[4], argv[5], argv[6], is_leader)
    if cmd == "regions" and sub == "list":
        return cmd_regions_list, ()
    if cmd == "neighborhoods" and sub == "list":
        return cmd_neighborhoods_list, (argv[3] if len(argv) > 3 else None,)
    if cmd == "seed":
        return cmd_seed, ()
    return None


def main(argv, client_factory=get_client) -> int:
    if len(argv) < 2 or argv[1].lower() == "help":
        print_help()
        return 0

    command = _resolve(argv)
    if command is None:
        print(f"Comando desconhecido: {' '.join(argv[1:])}")
        print_help()
        return 1

    func, args = command
    try:
        with client_factory() as client:
            func(client, *args)
    except CLIError as e:
        print(f"✗ Erro: {e}")
        return 1
    except httpx.HTTPError as e:
        print(f"✗ Erro de conexão: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
