from src.sa_common.errors import OffensiveNicknameError

OFFENSIVE_NICKNAMES: frozenset[str] = frozenset(
    {"swearword", "badword", "offensive", "hate", "dummy", "idiot", "stupid"}
)


def is_offensive_nickname(nickname: str | None) -> bool:
    """Exact, case-insensitive match against the denylist. Substrings do not count."""
    if nickname is None or not nickname.strip():
        return False
    return nickname.lower() in OFFENSIVE_NICKNAMES


def check_nickname(nickname: str | None) -> None:
    """Raise OffensiveNicknameError(2002) if the nickname is on the denylist."""
    if is_offensive_nickname(nickname):
        raise OffensiveNicknameError()
