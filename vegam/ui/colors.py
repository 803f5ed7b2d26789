"""Theme colors and color utilities for the UI."""


class Palette:
    """Calm light theme: zinc neutrals, sky accent, rose for mistakes."""

    BG = "#fafafa"
    CARD_BG = "#ffffff"
    CARD_BORDER = "#e4e4e7"

    TEXT = "#27272a"
    TEXT_MUTED = "#71717a"
    TEXT_FAINT = "#a1a1aa"

    ACCENT = "#0284c7"
    ACCENT_BG = "#e0f2fe"
    ACCENT_SOFT = "#38bdf8"
    ACTIVE_WORD_BG = "#f0f9ff"

    DANGER = "#e11d48"
    DANGER_BG = "#ffe4e6"

    BUTTON_BG = "#f4f4f5"
    BUTTON_HOVER = "#e4e4e7"
    BUTTON_TEXT = "#52525b"

    TRACK = "#e4e4e7"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except (TypeError, ValueError):
        return a


def progress_color(fraction: float) -> str:
    """Progress bar fill: sky while time is plentiful, shading to rose near the end."""
    if fraction < 0.75:
        return Palette.ACCENT_SOFT
    return blend_hex(Palette.ACCENT_SOFT, Palette.DANGER, (fraction - 0.75) / 0.25)
