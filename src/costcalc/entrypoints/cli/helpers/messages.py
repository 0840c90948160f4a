"""Terminal message helpers for the COSTCALC CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Messages write to stderr by default so stdout only carries the cost reports.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    A lightweight guard to decide whether to emit emojis or fall back to
    ASCII so terminals without UTF-8 don't raise `UnicodeEncodeError`.

    Args:
        character: A single Unicode character to test (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    """Return ``emoji`` when stderr can encode it, otherwise ``fallback``."""
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Warning marker suitable for terminals with/without emoji support.

    Returns:
        str: "⚠️" when the stream supports it; otherwise the ASCII fallback "[!]".
    """
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Success marker with an ASCII fallback.

    Returns:
        str: "✅" or "[OK]" depending on stream support.
    """
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Error marker with an ASCII fallback.

    Returns:
        str: "❌" or "[X]" depending on stream support.
    """
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Args:
        msg: The message to display.

    Example:
        ``⚠️  Tax and discount are ignored outside custom mode.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Args:
        msg: The message to display.

    Note:
        Status lines go to **stderr** so the report on stdout can be piped
        or redirected on its own.

    Example:
        ``✅  Calculation completed successfully!``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Args:
        msg: The message to display.

    Example:
        ``❌  Please enter a valid decimal number.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
