"""Stock theme tables.

Plain data only; :func:`zephyr.theme.model.default_theme` freezes these into
a :class:`~zephyr.theme.model.Theme`.
"""

from __future__ import annotations

SPACING: dict[str, str] = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

# Named colors that are not shade families.
SPECIAL_COLORS: dict[str, str] = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000000",
    "white": "#ffffff",
}

_SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")


def _family(*hexes: str) -> dict[str, str]:
    return dict(zip(_SHADES, hexes))


COLORS: dict[str, dict[str, str]] = {
    "slate": _family(
        "#f8fafc", "#f1f5f9", "#e2e8f0", "#cbd5e1", "#94a3b8", "#64748b",
        "#475569", "#334155", "#1e293b", "#0f172a", "#020617",
    ),
    "gray": _family(
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
        "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
    ),
    "zinc": _family(
        "#fafafa", "#f4f4f5", "#e4e4e7", "#d4d4d8", "#a1a1aa", "#71717a",
        "#52525b", "#3f3f46", "#27272a", "#18181b", "#09090b",
    ),
    "neutral": _family(
        "#fafafa", "#f5f5f5", "#e5e5e5", "#d4d4d4", "#a3a3a3", "#737373",
        "#525252", "#404040", "#262626", "#171717", "#0a0a0a",
    ),
    "stone": _family(
        "#fafaf9", "#f5f5f4", "#e7e5e4", "#d6d3d1", "#a8a29e", "#78716c",
        "#57534e", "#44403c", "#292524", "#1c1917", "#0c0a09",
    ),
    "red": _family(
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
        "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
    ),
    "orange": _family(
        "#fff7ed", "#ffedd5", "#fed7aa", "#fdba74", "#fb923c", "#f97316",
        "#ea580c", "#c2410c", "#9a3412", "#7c2d12", "#431407",
    ),
    "amber": _family(
        "#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24", "#f59e0b",
        "#d97706", "#b45309", "#92400e", "#78350f", "#451a03",
    ),
    "yellow": _family(
        "#fefce8", "#fef9c3", "#fef08a", "#fde047", "#facc15", "#eab308",
        "#ca8a04", "#a16207", "#854d0e", "#713f12", "#422006",
    ),
    "lime": _family(
        "#f7fee7", "#ecfccb", "#d9f99d", "#bef264", "#a3e635", "#84cc16",
        "#65a30d", "#4d7c0f", "#3f6212", "#365314", "#1a2e05",
    ),
    "green": _family(
        "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e",
        "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
    ),
    "emerald": _family(
        "#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399", "#10b981",
        "#059669", "#047857", "#065f46", "#064e3b", "#022c22",
    ),
    "teal": _family(
        "#f0fdfa", "#ccfbf1", "#99f6e4", "#5eead4", "#2dd4bf", "#14b8a6",
        "#0d9488", "#0f766e", "#115e59", "#134e4a", "#042f2e",
    ),
    "cyan": _family(
        "#ecfeff", "#cffafe", "#a5f3fc", "#67e8f9", "#22d3ee", "#06b6d4",
        "#0891b2", "#0e7490", "#155e75", "#164e63", "#083344",
    ),
    "sky": _family(
        "#f0f9ff", "#e0f2fe", "#bae6fd", "#7dd3fc", "#38bdf8", "#0ea5e9",
        "#0284c7", "#0369a1", "#075985", "#0c4a6e", "#082f49",
    ),
    "blue": _family(
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
        "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
    ),
    "indigo": _family(
        "#eef2ff", "#e0e7ff", "#c7d2fe", "#a5b4fc", "#818cf8", "#6366f1",
        "#4f46e5", "#4338ca", "#3730a3", "#312e81", "#1e1b4b",
    ),
    "violet": _family(
        "#f5f3ff", "#ede9fe", "#ddd6fe", "#c4b5fd", "#a78bfa", "#8b5cf6",
        "#7c3aed", "#6d28d9", "#5b21b6", "#4c1d95", "#2e1065",
    ),
    "purple": _family(
        "#faf5ff", "#f3e8ff", "#e9d5ff", "#d8b4fe", "#c084fc", "#a855f7",
        "#9333ea", "#7e22ce", "#6b21a8", "#581c87", "#3b0764",
    ),
    "fuchsia": _family(
        "#fdf4ff", "#fae8ff", "#f5d0fe", "#f0abfc", "#e879f9", "#d946ef",
        "#c026d3", "#a21caf", "#86198f", "#701a75", "#4a044e",
    ),
    "pink": _family(
        "#fdf2f8", "#fce7f3", "#fbcfe8", "#f9a8d4", "#f472b6", "#ec4899",
        "#db2777", "#be185d", "#9d174d", "#831843", "#500724",
    ),
    "rose": _family(
        "#fff1f2", "#ffe4e6", "#fecdd3", "#fda4af", "#fb7185", "#f43f5e",
        "#e11d48", "#be123c", "#9f1239", "#881337", "#4c0519",
    ),
}

# Mobile-first min-width breakpoints, in pixels.
BREAKPOINTS: dict[str, int] = {
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "2xl": 1536,
}

# (font-size, line-height)
FONT_SIZE: dict[str, tuple[str, str]] = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
    "5xl": ("3rem", "1"),
    "6xl": ("3.75rem", "1"),
    "7xl": ("4.5rem", "1"),
    "8xl": ("6rem", "1"),
    "9xl": ("8rem", "1"),
}

FONT_WEIGHT: dict[str, str] = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

FONT_FAMILY: dict[str, str] = {
    "sans": 'ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji", "Segoe UI Emoji"',
    "serif": 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
    "mono": 'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace',
}

LINE_HEIGHT: dict[str, str] = {
    "3": ".75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}

LETTER_SPACING: dict[str, str] = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

BORDER_RADIUS: dict[str, str] = {
    "none": "0px",
    "sm": "0.125rem",
    "": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

BORDER_WIDTH: dict[str, str] = {
    "": "1px",
    "0": "0px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

BOX_SHADOW: dict[str, str] = {
    "sm": "0 1px 2px 0 var(--shadow-color, rgb(0 0 0 / 0.05))",
    "": (
        "0 1px 3px 0 var(--shadow-color, rgb(0 0 0 / 0.1)), "
        "0 1px 2px -1px var(--shadow-color, rgb(0 0 0 / 0.1))"
    ),
    "md": (
        "0 4px 6px -1px var(--shadow-color, rgb(0 0 0 / 0.1)), "
        "0 2px 4px -2px var(--shadow-color, rgb(0 0 0 / 0.1))"
    ),
    "lg": (
        "0 10px 15px -3px var(--shadow-color, rgb(0 0 0 / 0.1)), "
        "0 4px 6px -4px var(--shadow-color, rgb(0 0 0 / 0.1))"
    ),
    "xl": (
        "0 20px 25px -5px var(--shadow-color, rgb(0 0 0 / 0.1)), "
        "0 8px 10px -6px var(--shadow-color, rgb(0 0 0 / 0.1))"
    ),
    "2xl": "0 25px 50px -12px var(--shadow-color, rgb(0 0 0 / 0.25))",
    "inner": "inset 0 2px 4px 0 var(--shadow-color, rgb(0 0 0 / 0.05))",
    "none": "0 0 #0000",
}

MAX_WIDTH: dict[str, str] = {
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "prose": "65ch",
}

Z_INDEX: dict[str, str] = {
    "0": "0",
    "10": "10",
    "20": "20",
    "30": "30",
    "40": "40",
    "50": "50",
    "auto": "auto",
}

DURATION: dict[str, str] = {
    "0": "0s",
    "75": "75ms",
    "100": "100ms",
    "150": "150ms",
    "200": "200ms",
    "300": "300ms",
    "500": "500ms",
    "700": "700ms",
    "1000": "1000ms",
}

TIMING_FUNCTION: dict[str, str] = {
    "linear": "linear",
    "in": "cubic-bezier(0.4, 0, 1, 1)",
    "out": "cubic-bezier(0, 0, 0.2, 1)",
    "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
}

BLUR: dict[str, str] = {
    "none": "0",
    "sm": "4px",
    "": "8px",
    "md": "12px",
    "lg": "16px",
    "xl": "24px",
    "2xl": "40px",
    "3xl": "64px",
}

DROP_SHADOW: dict[str, str] = {
    "sm": "drop-shadow(0 1px 1px rgb(0 0 0 / 0.05))",
    "": "drop-shadow(0 1px 2px rgb(0 0 0 / 0.1)) drop-shadow(0 1px 1px rgb(0 0 0 / 0.06))",
    "md": "drop-shadow(0 4px 3px rgb(0 0 0 / 0.07)) drop-shadow(0 2px 2px rgb(0 0 0 / 0.06))",
    "lg": "drop-shadow(0 10px 8px rgb(0 0 0 / 0.04)) drop-shadow(0 4px 3px rgb(0 0 0 / 0.1))",
    "xl": "drop-shadow(0 20px 13px rgb(0 0 0 / 0.03)) drop-shadow(0 8px 5px rgb(0 0 0 / 0.08))",
    "2xl": "drop-shadow(0 25px 25px rgb(0 0 0 / 0.15))",
    "none": "drop-shadow(0 0 #0000)",
}

ANIMATION: dict[str, str] = {
    "none": "none",
    "spin": "spin 1s linear infinite",
    "ping": "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite",
    "pulse": "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
    "bounce": "bounce 1s infinite",
}

# Keyframe steps per animation name; each step maps a selector to declarations.
KEYFRAMES: dict[str, dict[str, str]] = {
    "spin": {"to": "transform: rotate(360deg)"},
    "ping": {"75%, 100%": "transform: scale(2); opacity: 0"},
    "pulse": {"50%": "opacity: 0.5"},
    "bounce": {
        "0%, 100%": (
            "transform: translateY(-25%); "
            "animation-timing-function: cubic-bezier(0.8, 0, 1, 1)"
        ),
        "50%": "transform: none; animation-timing-function: cubic-bezier(0, 0, 0.2, 1)",
    },
}

ROTATE: tuple[str, ...] = ("0", "1", "2", "3", "6", "12", "45", "90", "180")

SCALE: tuple[str, ...] = ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150")

OPACITY_STEPS: tuple[str, ...] = (
    "0", "5", "10", "15", "20", "25", "30", "35", "40", "45", "50",
    "55", "60", "65", "70", "75", "80", "85", "90", "95", "100",
)

# Custom variants: selector templates use "&" for the generated selector;
# templates starting with "@media" become media conditions.
VARIANTS: dict[str, str] = {
    "group-hover": ".group:hover &",
    "group-focus": ".group:focus &",
    "group-active": ".group:active &",
    "group-disabled": ".group:disabled &",
    "peer-hover": ".peer:hover ~ &",
    "peer-focus": ".peer:focus ~ &",
    "peer-checked": ".peer:checked ~ &",
    "peer-disabled": ".peer:disabled ~ &",
    "peer-invalid": ".peer:invalid ~ &",
    "before": "&::before",
    "after": "&::after",
    "placeholder": "&::placeholder",
    "selection": "&::selection",
    "marker": "&::marker",
    "file": "&::file-selector-button",
    "rtl": '[dir="rtl"] &',
    "ltr": '[dir="ltr"] &',
    "motion-safe": "@media (prefers-reduced-motion: no-preference)",
    "motion-reduce": "@media (prefers-reduced-motion: reduce)",
    "pointer-fine": "@media (pointer: fine)",
    "pointer-coarse": "@media (pointer: coarse)",
    "portrait": "@media (orientation: portrait)",
    "landscape": "@media (orientation: landscape)",
    "print": "@media print",
}

# Pseudo-class state variants.
STATES: dict[str, str] = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-visible": ":focus-visible",
    "focus-within": ":focus-within",
    "active": ":active",
    "visited": ":visited",
    "target": ":target",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "required": ":required",
    "invalid": ":invalid",
    "placeholder-shown": ":placeholder-shown",
    "read-only": ":read-only",
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "empty": ":empty",
}
