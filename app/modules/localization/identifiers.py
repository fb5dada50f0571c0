"""Accessor names and parameter lists derived from catalog keys.

Each catalog key becomes an identifier usable in generated source code,
together with the typed parameters its format placeholders require:

    "Account Deletion/Hi!"  ->  accountDeletionHi
    "import"                ->  _import
    "2fa"                   ->  _2fa
    "%@ sent %d files"      ->  sentDFiles(param1: text, param2: integer)
"""

import re
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from infrastructure.logging import get_module_logger
from modules.localization.exceptions import IdentifierCollisionError
from modules.localization.models import Catalog, LocalizationGroup

logger = get_module_logger()

FALLBACK_IDENTIFIER = "key"
SEPARATOR = "_"

# fmt: off
SWIFT_RESERVED_WORDS: FrozenSet[str] = frozenset(
    {
        # Declarations
        "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
        "func", "import", "init", "inout", "internal", "let", "open", "operator",
        "private", "precedencegroup", "protocol", "public", "rethrows", "static",
        "struct", "subscript", "typealias", "var",
        # Statements
        "break", "case", "catch", "continue", "default", "defer", "do", "else",
        "fallthrough", "for", "guard", "if", "in", "repeat", "return", "switch",
        "throw", "try", "where", "while",
        # Expressions and types
        "as", "Any", "false", "is", "nil", "super", "self", "Self", "true",
        # Context-sensitive
        "associativity", "convenience", "dynamic", "didSet", "final", "get",
        "infix", "indirect", "lazy", "left", "mutating", "none", "nonmutating",
        "optional", "override", "postfix", "precedence", "prefix", "Protocol",
        "required", "right", "set", "Type", "unowned", "weak", "willSet",
    }
)
# fmt: on

_REPLACED_CHARACTERS = "\n\t\r/\\:;,.!?()[]{}\"'`~@#$%^&*+=|<>"
_REPLACEMENTS = str.maketrans({char: SEPARATOR for char in _REPLACED_CHARACTERS})
_SPACE_RUN = re.compile(r" +")
_SEPARATOR_RUN = re.compile(r"_+")

# `%%` is consumed first so the percent sign it escapes never starts a token.
PLACEHOLDER_PATTERN = re.compile(
    r"%%|%(?P<length>hh|h|ll|l|q|z|t|j)?(?P<conversion>[@dfscxXoueEgGp])"
)


class ParameterType(str, Enum):
    """Language-neutral type of a format argument."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    CHARACTER = "character"
    POINTER = "pointer"


CONVERSION_TYPES: Dict[str, ParameterType] = {
    "@": ParameterType.TEXT,
    "s": ParameterType.TEXT,
    "d": ParameterType.INTEGER,
    "o": ParameterType.INTEGER,
    "u": ParameterType.INTEGER,
    "x": ParameterType.INTEGER,
    "X": ParameterType.INTEGER,
    "f": ParameterType.FLOAT,
    "e": ParameterType.FLOAT,
    "E": ParameterType.FLOAT,
    "g": ParameterType.FLOAT,
    "G": ParameterType.FLOAT,
    "c": ParameterType.CHARACTER,
    "p": ParameterType.POINTER,
}


class CollisionPolicy(str, Enum):
    """What happens when two keys derive the same identifier."""

    SUFFIX = "suffix"
    ERROR = "error"


@dataclass(frozen=True)
class Parameter:
    """One accessor argument.

    Attributes:
        name: Argument name (param1, param2, ...).
        type: Argument type.
        specifier: Placeholder it was derived from, e.g. "%lld".
    """

    name: str
    type: ParameterType
    specifier: str


@dataclass(frozen=True)
class IdentifierRecord:
    """Everything an emitter needs to render one accessor."""

    key: str
    name: str
    parameters: Tuple[Parameter, ...] = field(default_factory=tuple)
    comment: Optional[str] = None

    @property
    def has_parameters(self) -> bool:
        return bool(self.parameters)


def scan_placeholders(text: str) -> List[str]:
    """Format placeholders of text, left to right. `%%` is not one."""
    return [
        match.group(0)
        for match in PLACEHOLDER_PATTERN.finditer(text)
        if match.group("conversion")
    ]


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or unicodedata.category(char).startswith("M")


def split_components(text: str) -> List[str]:
    """Split on separators and every character that is not a letter, digit or mark."""
    components: List[str] = []
    current: List[str] = []
    for char in text:
        if char != SEPARATOR and _is_identifier_char(char):
            current.append(char)
        elif current:
            components.append("".join(current))
            current = []
    if current:
        components.append("".join(current))
    return components


class IdentifierSynthesizer:
    """Derives accessor identifiers and parameters from catalog keys.

    Args:
        reserved_words: Words that get escape_prefix prepended.
        escape_prefix: Prefix for reserved words and names starting with a digit.
        collision_policy: "suffix" numbers later duplicates, "error" raises.
    """

    def __init__(
        self,
        reserved_words: Iterable[str] = SWIFT_RESERVED_WORDS,
        escape_prefix: str = "_",
        collision_policy: str = CollisionPolicy.SUFFIX,
    ) -> None:
        if not escape_prefix:
            raise ValueError("escape_prefix must not be empty")
        self.reserved_words = frozenset(reserved_words)
        self.escape_prefix = escape_prefix
        self.collision_policy = CollisionPolicy(collision_policy)

    def normalize(self, key: str) -> str:
        """Replace punctuation, whitespace and path separators with `_`."""
        text = key.translate(_REPLACEMENTS)
        text = _SPACE_RUN.sub(SEPARATOR, text)
        text = _SEPARATOR_RUN.sub(SEPARATOR, text)
        text = text.strip(SEPARATOR)
        return text or FALLBACK_IDENTIFIER

    def derive_identifier(self, key: str) -> str:
        """camelCase identifier for a key, escaped when needed."""
        components = split_components(self.normalize(key))
        if not components:
            return FALLBACK_IDENTIFIER

        name = components[0].lower()
        name += "".join(comp[0].upper() + comp[1:] for comp in components[1:])

        if name in self.reserved_words:
            name = self.escape_prefix + name
        if name[0].isnumeric():
            name = self.escape_prefix + name
        return name

    def derive_parameters(
        self, key: str, group: Optional[LocalizationGroup] = None
    ) -> Tuple[Parameter, ...]:
        """Typed parameters for the placeholders of a key.

        The key is scanned first. When it has no placeholder the localized
        values are scanned in catalog order and the first one that has any
        is used on its own.
        """
        specifiers = scan_placeholders(key)
        if not specifiers and group is not None:
            for unit in (group.localizations or {}).values():
                if unit.value is None:
                    continue
                specifiers = scan_placeholders(unit.value)
                if specifiers:
                    break

        return tuple(
            Parameter(
                name=f"param{index}",
                type=CONVERSION_TYPES[specifier[-1]],
                specifier=specifier,
            )
            for index, specifier in enumerate(specifiers, start=1)
        )

    def synthesize(self, catalog: Catalog) -> List[IdentifierRecord]:
        """Records for every key of a catalog, in sorted key order.

        Raises:
            IdentifierCollisionError: If two keys derive the same name and the
                policy is "error".
        """
        records: List[IdentifierRecord] = []
        owners: Dict[str, str] = {}

        for key in sorted(catalog.strings):
            group = catalog.strings[key]
            base = self.derive_identifier(key)
            name = base

            if name in owners:
                if self.collision_policy is CollisionPolicy.ERROR:
                    raise IdentifierCollisionError(name, [owners[name], key])
                counter = 2
                while f"{base}{counter}" in owners:
                    counter += 1
                name = f"{base}{counter}"
                logger.warning(
                    "identifier_collision_renamed",
                    key=key,
                    identifier=base,
                    renamed_to=name,
                    first_key=owners[base],
                )

            owners[name] = key
            records.append(
                IdentifierRecord(
                    key=key,
                    name=name,
                    parameters=self.derive_parameters(key, group),
                    comment=group.comment,
                )
            )

        logger.debug("identifiers_synthesized", count=len(records))
        return records
