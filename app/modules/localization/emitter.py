"""Swift accessor generation.

Renders identifier records as a `String` extension so that localized
strings are referenced through checked names instead of raw keys:

    extension String {
      struct Localizable {
        static let welcome = NSLocalizedString("Welcome", comment: "")
        static func sentDFiles(param1: String, param2: Int) -> String {
          let format = NSLocalizedString("%@ sent %d files", comment: "")
          return String(format: format, param1, param2)
        }
      }
    }
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from infrastructure.logging import get_module_logger
from modules.localization.identifiers import (
    IdentifierRecord,
    ParameterType,
    split_components,
)

logger = get_module_logger()

DEFAULT_TABLE = "Localizable"
GENERATOR_NAME = "xcstrings-translate"
INDENT = "  "

SWIFT_TYPES: Dict[ParameterType, str] = {
    ParameterType.TEXT: "String",
    ParameterType.INTEGER: "Int",
    ParameterType.FLOAT: "Double",
    ParameterType.CHARACTER: "Character",
    ParameterType.POINTER: "UnsafeRawPointer",
}

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def swift_string_literal(text: str) -> str:
    """Double-quoted single-line Swift literal for text."""
    out = []
    for char in text:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append("\\u{%X}" % ord(char))
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def swift_type_name(table_name: str) -> str:
    """Struct name for a table; non-identifier names become PascalCase."""
    if table_name.isidentifier():
        return table_name
    components = split_components(table_name)
    name = "".join(comp[0].upper() + comp[1:] for comp in components)
    if not name:
        return DEFAULT_TABLE
    if name[0].isnumeric():
        name = "_" + name
    return name


class SwiftAccessorEmitter:
    """Writes a Swift source file with one accessor per catalog key."""

    file_extension = ".swift"

    def render(
        self,
        records: Iterable[IdentifierRecord],
        table_name: str = DEFAULT_TABLE,
        file_name: Optional[str] = None,
    ) -> str:
        """Swift source for the given records.

        Args:
            records: Records in the order they should appear.
            table_name: Strings table the keys live in (the catalog file stem).
            file_name: Name shown in the header. Defaults to the type name.

        Returns:
            Complete file content.
        """
        type_name = swift_type_name(table_name)
        lines: List[str] = [
            "//",
            f"//  {file_name or type_name + self.file_extension}",
            "//",
            f"//  Generated by {GENERATOR_NAME}",
            "//",
            "",
            "import Foundation",
            "",
            "extension String {",
            f"{INDENT}struct {type_name} {{",
        ]
        for record in records:
            lines.extend(self._render_record(record, table_name))
        lines.extend([f"{INDENT}}}", "}", ""])
        return "\n".join(lines)

    def _lookup(self, record: IdentifierRecord, table_name: str) -> str:
        args = [swift_string_literal(record.key)]
        if table_name != DEFAULT_TABLE:
            args.append(f"tableName: {swift_string_literal(table_name)}")
        args.append(f"comment: {swift_string_literal(record.comment or '')}")
        return f"NSLocalizedString({', '.join(args)})"

    def _render_record(self, record: IdentifierRecord, table_name: str) -> List[str]:
        member = INDENT * 2
        body = INDENT * 3
        lookup = self._lookup(record, table_name)

        if not record.has_parameters:
            return [f"{member}static let {record.name} = {lookup}"]

        signature = ", ".join(
            f"{param.name}: {SWIFT_TYPES[param.type]}" for param in record.parameters
        )
        arguments = ", ".join(param.name for param in record.parameters)
        return [
            f"{member}static func {record.name}({signature}) -> String {{",
            f"{body}let format = {lookup}",
            f"{body}return String(format: format, {arguments})",
            f"{member}}}",
        ]

    def output_path_for(self, catalog_path: Union[str, Path]) -> Path:
        """`<stem>.swift` next to the catalog."""
        return Path(catalog_path).with_suffix(self.file_extension)

    def write(
        self,
        records: Iterable[IdentifierRecord],
        catalog_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """Render and write the accessor file for a catalog.

        Args:
            records: Records to render.
            catalog_path: Catalog the records come from. Its stem names the table.
            output_path: Destination. Defaults to `<stem>.swift` next to the catalog.

        Returns:
            The path written.
        """
        catalog_path = Path(catalog_path)
        target = Path(output_path) if output_path else self.output_path_for(catalog_path)
        records = list(records)

        source = self.render(records, catalog_path.stem, file_name=target.name)
        target.write_text(source, encoding="utf-8")
        logger.info("swift_accessors_written", path=str(target), count=len(records))
        return target
