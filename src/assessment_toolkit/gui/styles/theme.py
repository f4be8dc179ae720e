"""
Theme definitions for the dimension selection screen.
"""


class Colors:
    # Brand
    NAVY = "#002d46"
    ACCENT = "#64c8eb"
    ACCENT_BG = "#f0f8ff"

    # Text
    TEXT_PRIMARY = "#002d46"
    TEXT_SECONDARY = "#555555"
    TEXT_MUTED = "#777777"
    TEXT_ON_PRIMARY = "#ffffff"
    TEXT_DISABLED = "#a0a0a0"

    # Surfaces
    SURFACE = "#ffffff"
    SURFACE_SELECTED = "#f8f9fa"
    BORDER = "#dee2e6"
    DISABLED_BG = "#e0e0e0"

    # Status
    ERROR = "#d32f2f"


class Fonts:
    H1 = "18pt"
    BODY = "11pt"
    SMALL = "9pt"

    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "600"
    WEIGHT_BOLD = "700"


class Styles:
    TITLE = f"""
        QLabel {{
            color: {Colors.NAVY};
            font-size: {Fonts.H1};
            font-weight: {Fonts.WEIGHT_BOLD};
        }}
    """

    SELECT_ALL = f"""
        QCheckBox {{
            color: {Colors.NAVY};
            font-weight: {Fonts.WEIGHT_BOLD};
            padding-bottom: 8px;
            border-bottom: 2px solid {Colors.NAVY};
        }}
    """

    DIMENSION_CARD = f"""
        QFrame {{
            background: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
        }}
    """

    DIMENSION_CARD_SELECTED = f"""
        QFrame {{
            background: {Colors.SURFACE_SELECTED};
            border: 2px solid {Colors.ACCENT};
            border-radius: 6px;
        }}
    """

    DIMENSION_META = f"""
        QLabel {{
            color: {Colors.TEXT_MUTED};
            font-size: {Fonts.SMALL};
            border: none;
        }}
    """

    ESTIMATE_PANEL = f"""
        QFrame {{
            background: {Colors.ACCENT_BG};
            border: 1px solid {Colors.ACCENT};
            border-radius: 6px;
        }}
        QLabel {{
            color: {Colors.NAVY};
            border: none;
        }}
    """

    ERROR_LABEL = f"""
        QLabel {{
            color: {Colors.ERROR};
            font-weight: {Fonts.WEIGHT_MEDIUM};
        }}
    """

    BUTTON_PRIMARY = f"""
        QPushButton {{
            background-color: {Colors.NAVY};
            color: {Colors.TEXT_ON_PRIMARY};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
        }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
        }}
    """
