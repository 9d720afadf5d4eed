import logging

from . import ir
from .capabilities import Capabilities
from .families import TypeFamily, get_family
from .lexer import tokenize
from .parser_impl.base import TokenCursor

logger = logging.getLogger(__name__)


def parse_attributes(
    source: str,
    family: TypeFamily | str,
    capabilities: Capabilities | None = None,
) -> ir.Attributes:
    """
    Parse and validate one guard annotation.

    Tokenizes the annotation, parses its options with the family grammar,
    then checks the validators for consistency. Nothing is kept between
    calls.

    Args:
        source: Annotation text, e.g. ``sanitize(trim), validate(not_empty)``
        family: Type family, or the declared inner type name to pick one
        capabilities: Enabled capabilities; all disabled when omitted

    Returns:
        Finalized Attributes with the validated guard

    Raises:
        GuardError: On the first syntax, type or consistency error found
    """
    if isinstance(family, str):
        family = get_family(family)
    capabilities = capabilities or Capabilities()

    logger.debug("Parsing %s annotation: %s", family.name, source)
    cursor = TokenCursor(tokenize(source), source)
    raw = family.parse_attributes(cursor, capabilities)
    guard = family.validate(raw.guard)

    return ir.Attributes(guard=guard, new_unchecked=raw.new_unchecked, default=raw.default)


def parse_guard(
    source: str,
    family: TypeFamily | str,
    capabilities: Capabilities | None = None,
) -> ir.Guard:
    """
    Parse an annotation and return only its guard.

    See ``parse_attributes`` for arguments and errors.
    """
    return parse_attributes(source, family, capabilities).guard
