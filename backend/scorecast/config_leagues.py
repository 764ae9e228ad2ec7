"""League allow-list, league metadata and news domain catalog."""

LEAGUE_INFO: dict[str, dict[str, str]] = {
    "UEFA Champions League": {"country": "International", "federation": "UEFA"},
    "UEFA Europa League": {"country": "International", "federation": "UEFA"},
    "UEFA Europa Conference League": {"country": "International", "federation": "UEFA"},
    "UEFA Conference League": {"country": "International", "federation": "UEFA"},
    "UEFA Nations League": {"country": "International", "federation": "UEFA"},
    "Euro Championship": {"country": "International", "federation": "UEFA"},
    "UEFA European Championship": {"country": "International", "federation": "UEFA"},
    "Premier League": {"country": "England", "federation": "FA"},
    "La Liga": {"country": "Spain", "federation": "RFEF"},
    "Primera Division": {"country": "Spain", "federation": "RFEF"},
    "Bundesliga": {"country": "Germany", "federation": "DFB"},
    "Bundesliga 1": {"country": "Germany", "federation": "DFB"},
    "Serie A": {"country": "Italy", "federation": "FIGC"},
    "Ligue 1": {"country": "France", "federation": "FFF"},
    "Eredivisie": {"country": "Netherlands", "federation": "KNVB"},
    "Primeira Liga": {"country": "Portugal", "federation": "FPF"},
}

UNKNOWN_LEAGUE_INFO: dict[str, str] = {"country": "Unknown", "federation": "Unknown"}

# Every league with metadata is shown on the dashboard.
DEFAULT_ALLOWED_LEAGUES: list[str] = list(LEAGUE_INFO)

DEFAULT_NEWS_DOMAINS: list[str] = [
    "bbc.com",
    "skysports.com",
    "espn.com",
    "goal.com",
    "theguardian.com",
    "marca.com",
    "as.com",
    "kicker.de",
    "gazzetta.it",
    "lequipe.fr",
    "football-italia.net",
    "transfermarkt.com",
]


def get_league_info(league_name: str) -> dict[str, str]:
    return dict(LEAGUE_INFO.get(league_name, UNKNOWN_LEAGUE_INFO))
