"""Token table for bulk overrides.

Maps the literal tokens accepted by `RunEnvContext.apply` to the Override
they stand for. Flag tokens come first, then running environment names,
then execution mode names; the sets are disjoint so order only fixes
iteration, not precedence.
"""

from types import MappingProxyType

from ..domain.environments import ExecutionMode, RunningEnvironment
from ..domain.exceptions import UnknownTokenError
from ..domain.overrides import Override, OverrideKind


def _build_token_table() -> dict[str, Override]:
    table = {
        "testing": Override(kind=OverrideKind.SET_TESTING),
        "-testing": Override(kind=OverrideKind.CLEAR_TESTING),
        "debug": Override(kind=OverrideKind.SET_DEBUG),
        "-debug": Override(kind=OverrideKind.CLEAR_DEBUG),
    }
    for env in RunningEnvironment:
        table[str(env)] = Override(
            kind=OverrideKind.RUNNING_ENVIRONMENT, value=str(env)
        )
    for mode in ExecutionMode:
        table[str(mode)] = Override(kind=OverrideKind.EXECUTION_MODE, value=str(mode))
    return table


TOKEN_TABLE = MappingProxyType(_build_token_table())


def parse_override(token: str | None) -> Override | None:
    """Translate a token into an Override.

    Returns:
        The matching Override, or None for an empty token.

    Raises:
        UnknownTokenError: If the token is not in the table.
    """
    if not token:
        return None
    try:
        return TOKEN_TABLE[token]
    except KeyError:
        raise UnknownTokenError(token) from None
