"""Classification of table header cells into semantic column roles.

The classification is a pure function of the header. It is computed once per
table and the assembler only dispatches on the resulting roles.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from rdflib import OWL, SKOS, URIRef

logger = logging.getLogger(__name__)

LANGUAGES = ("nl", "fr", "de", "en")

ALT_PREFIX = "alt_"
DEF_PREFIX = "def_"
SCOPE_PREFIX = "scope_"
START_HEADER = "start"
END_HEADER = "end"
LITERAL_PREFIX = "http"

# Header prefixes (matched case-insensitively) for links to other vocabularies.
LINK_PROPERTIES = {
    "sameAs": OWL.sameAs,
    "exactMatch": SKOS.exactMatch,
    "closeMatch": SKOS.closeMatch,
    "broadMatch": SKOS.broadMatch,
    "narrowMatch": SKOS.narrowMatch,
}
# Longest prefix first, ties in lexical order.
_LINK_PREFIXES = sorted(
    ((name.lower(), prop) for name, prop in LINK_PROPERTIES.items()),
    key=lambda item: (-len(item[0]), item[0]),
)


class Role(Enum):
    IDENTIFIER = "identifier"
    PARENT = "parent"
    PREF_LABEL = "prefLabel"
    ALT_LABEL = "altLabel"
    DEFINITION = "definition"
    SCOPE_NOTE = "scopeNote"
    START_DATE = "startDate"
    END_DATE = "endDate"
    LINK = "link"
    LITERAL = "literal"
    IGNORED = "ignored"


@dataclass(frozen=True)
class ColumnRole:
    position: int
    header: str
    role: Role
    language: str | None = None
    predicate: URIRef | None = None


def _language_role(header: str) -> tuple[Role, str] | None:
    if header in LANGUAGES:
        return Role.PREF_LABEL, header
    for prefix, role in (
        (ALT_PREFIX, Role.ALT_LABEL),
        (DEF_PREFIX, Role.DEFINITION),
        (SCOPE_PREFIX, Role.SCOPE_NOTE),
    ):
        if header.startswith(prefix) and header[len(prefix) :] in LANGUAGES:
            return role, header[len(prefix) :]
    return None


def link_property(header: str) -> URIRef | None:
    """Return the link property for a header or None if no prefix matches."""
    lowered = header.lower()
    for prefix, prop in _LINK_PREFIXES:
        if lowered.startswith(prefix):
            return prop
    return None


def classify_column(position: int, header: str) -> ColumnRole:
    """Determine the role of a single header cell."""
    if position == 0:
        return ColumnRole(position, header, Role.IDENTIFIER)
    if position == 1:
        return ColumnRole(position, header, Role.PARENT)

    if lang_role := _language_role(header):
        role, language = lang_role
        return ColumnRole(position, header, role, language=language)
    if header == START_HEADER:
        return ColumnRole(position, header, Role.START_DATE)
    if header == END_HEADER:
        return ColumnRole(position, header, Role.END_DATE)
    if (prop := link_property(header)) is not None:
        return ColumnRole(position, header, Role.LINK, predicate=prop)
    if header.startswith(LITERAL_PREFIX):
        return ColumnRole(position, header, Role.LITERAL, predicate=URIRef(header))
    return ColumnRole(position, header, Role.IGNORED)


def classify_header(header) -> tuple[ColumnRole, ...]:
    """Classify all header cells. Ignored columns are reported in the log."""
    roles = tuple(classify_column(pos, str(cell)) for pos, cell in enumerate(header))
    for column in roles:
        if column.role is Role.IGNORED:
            logger.debug(
                'Column %i "%s" has no known meaning and is ignored.',
                column.position + 1,
                column.header,
            )
    return roles
