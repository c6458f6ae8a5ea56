# Area: Session
"""Player name checks done before a match may start."""

from typing import List


def validate_player_names(player_a: str, player_b: str) -> List[str]:
    """
    Check the two names entered on the start form.

    Returns:
        A list of problems, empty when the match may start
    """
    problems = []
    for label, name in (("Player one", player_a), ("Player two", player_b)):
        if not isinstance(name, str) or not name.strip():
            problems.append(f"{label} needs a name")
    if not problems and player_a.strip() == player_b.strip():
        problems.append("Players can't have the same name")
    return problems
