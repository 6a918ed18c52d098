# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Emoji display-width helper for status line prefixes.

Status glyphs mix natively wide emoji (``✅``, ``❌``) with VS16 sequences
(``⚠️``) that many terminals draw one cell wide. Padding every prefix to the
same cell width keeps the message text aligned no matter which glyph leads.
"""

from rich.cells import cell_len


def draw_emoji(emoji: str, width: int = 2) -> str:
    """Pad *emoji* with spaces to *width* terminal cells."""
    if not emoji:
        return ""
    try:
        emoji_width = cell_len(emoji)
    except (TypeError, ValueError):
        return emoji
    if emoji_width >= width:
        return emoji
    return f"{emoji}{' ' * (width - emoji_width)}"
