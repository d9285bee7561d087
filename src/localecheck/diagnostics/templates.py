"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All exception messages are created here. NO f-strings in exception constructors!
    This keeps grammar messages stable (they are echoed into INVALID_FORMAT
    reports and asserted by tests) and documents every error case.
    """

    # ------------------------------------------------------------------
    # printf grammar
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_conversion(conversion: str, position: int | None = None) -> Diagnostic:
        """Unknown printf conversion or stray '%'.

        Args:
            conversion: Offending conversion text
            position: Offset of the '%' in the template

        Returns:
            Diagnostic for UNKNOWN_CONVERSION
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CONVERSION,
            message=f"Unknown format conversion '{conversion}'",
            hint="Escape a literal percent sign as %%",
            position=position,
        )

    @staticmethod
    def duplicate_flags(flag: str, position: int | None = None) -> Diagnostic:
        """Flag repeated in one printf specifier."""
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_FLAGS,
            message=f"Duplicate format flag '{flag}'",
            position=position,
        )

    @staticmethod
    def flag_conversion_mismatch(
        flag: str, conversion: str, position: int | None = None
    ) -> Diagnostic:
        """Flag not applicable to the conversion.

        Args:
            flag: Offending flag character
            conversion: Conversion character
            position: Offset of the specifier

        Returns:
            Diagnostic for INCOMPATIBLE_FLAGS
        """
        return Diagnostic(
            code=DiagnosticCode.INCOMPATIBLE_FLAGS,
            message=f"Flag '{flag}' is not allowed with conversion '{conversion}'",
            position=position,
        )

    @staticmethod
    def illegal_flags(flags: str, position: int | None = None) -> Diagnostic:
        """Flags that cannot be combined."""
        return Diagnostic(
            code=DiagnosticCode.INCOMPATIBLE_FLAGS,
            message=f"Illegal flag combination '{flags}'",
            position=position,
        )

    @staticmethod
    def missing_width(specifier: str, position: int | None = None) -> Diagnostic:
        """'-' or '0' flag without width.

        Args:
            specifier: Canonical text of the specifier
            position: Offset of the specifier

        Returns:
            Diagnostic for MISSING_WIDTH
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_WIDTH,
            message=f"Missing width in format specifier '%{specifier}'",
            hint="The '-' and '0' flags require an explicit width",
            position=position,
        )

    @staticmethod
    def invalid_width(width: int, position: int | None = None) -> Diagnostic:
        """Width rejected for the conversion."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_WIDTH,
            message=f"Illegal format width {width}",
            position=position,
        )

    @staticmethod
    def invalid_precision(precision: int, position: int | None = None) -> Diagnostic:
        """Precision rejected for the conversion."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_PRECISION,
            message=f"Illegal format precision {precision}",
            position=position,
        )

    # ------------------------------------------------------------------
    # MessageFormat grammar
    # ------------------------------------------------------------------

    @staticmethod
    def bad_argument_index(index_text: str, position: int | None = None) -> Diagnostic:
        """Argument index that is not an integer.

        Args:
            index_text: Raw index segment
            position: Offset of the closing brace

        Returns:
            Diagnostic for BAD_ARGUMENT_INDEX
        """
        return Diagnostic(
            code=DiagnosticCode.BAD_ARGUMENT_INDEX,
            message=f"Can't parse argument number '{index_text}'",
            hint="Arguments are referenced by position: {0}, {1,number}",
            position=position,
        )

    @staticmethod
    def negative_argument_index(index: int, position: int | None = None) -> Diagnostic:
        """Argument index below zero."""
        return Diagnostic(
            code=DiagnosticCode.BAD_ARGUMENT_INDEX,
            message=f"Negative argument number {index}",
            position=position,
        )

    @staticmethod
    def bad_format_type(format_type: str, position: int | None = None) -> Diagnostic:
        """Format type outside the accepted set."""
        return Diagnostic(
            code=DiagnosticCode.BAD_FORMAT_TYPE,
            message=f"Format type = '{format_type}'",
            hint="Use number, date, time or choice",
            position=position,
        )

    @staticmethod
    def unbalanced_braces(position: int | None = None) -> Diagnostic:
        """Template ends inside an argument block."""
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACES,
            message="Unmatched braces in the pattern",
            hint="Quote literal braces with single quotes: '{'",
            position=position,
        )

    # ------------------------------------------------------------------
    # Configuration and resources
    # ------------------------------------------------------------------

    @staticmethod
    def conflicting_identifier_dialect(source: str, key: str) -> Diagnostic:
        """Identifier declared with both dialects.

        Args:
            source: Message source name
            key: Identifier with conflicting markers

        Returns:
            Diagnostic for CONFLICTING_DIALECT
        """
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_DIALECT,
            message=f"Specified more than one format for key: {source}#{key}",
            hint="Declare either printf or message format, not both",
        )

    @staticmethod
    def conflicting_source_dialect(source: str) -> Diagnostic:
        """Source declared with more than one default dialect."""
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_DIALECT,
            message=f"Specified more than one default format in {source}",
        )

    @staticmethod
    def duplicate_identifier(source: str, key: str) -> Diagnostic:
        """Identifier declared twice in one source."""
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_IDENTIFIER,
            message=f"Duplicate message identifier in {source}: {key}",
        )

    @staticmethod
    def unknown_locales(tags: tuple[str, ...]) -> Diagnostic:
        """Locale tags unknown to CLDR."""
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"Unknown locale(s): {', '.join(tags)}",
            hint="Use CLDR locale identifiers such as de, pt_BR or zh_Hant_TW",
        )

    @staticmethod
    def bad_unicode_escape(escape: str, line: int) -> Diagnostic:
        """Malformed \\uXXXX escape in a .properties file."""
        return Diagnostic(
            code=DiagnosticCode.PROPERTIES_SYNTAX,
            message=f"Malformed \\uxxxx encoding '{escape}' at line {line}",
            position=line,
        )

    @staticmethod
    def unpaired_surrogate(escape: str, line: int) -> Diagnostic:
        """\\uXXXX escape for half of a surrogate pair without its partner."""
        return Diagnostic(
            code=DiagnosticCode.PROPERTIES_SYNTAX,
            message=f"Unpaired surrogate escape '{escape}' at line {line}",
            hint="Escape characters outside the BMP as a high/low pair: \\uD83D\\uDE00",
            position=line,
        )

    @staticmethod
    def unsafe_resource_name(resource_name: str) -> Diagnostic:
        """Resource name escaping the loader root."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_RESOURCE_PATH,
            message=f"Resource path escapes root directory: '{resource_name}'",
        )
