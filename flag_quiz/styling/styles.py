"""Qt stylesheets for the game screen."""

from .color_palette import ColorPalette


class Styles:
    """Helper class to generate Qt stylesheets for the game widgets."""

    @staticmethod
    def get_background_style() -> str:
        stops = " ".join(
            f"stop:{stop.position} {stop.color}," for stop in ColorPalette.BACKGROUND_STOPS
        ).rstrip(",")
        return f"""
            QWidget#gameBackground {{
                background: qradialgradient(cx:0.5, cy:0, radius:1.2, fx:0.5, fy:0, {stops});
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return f"font-size: 28pt; font-weight: bold; color: {ColorPalette.TITLE_TEXT}; background: transparent;"

    @staticmethod
    def get_card_style() -> str:
        return f"""
            QFrame#questionCard {{
                background-color: {ColorPalette.CARD_BACKGROUND};
                border-radius: 20px;
            }}
            QFrame#questionCard QLabel {{
                background: transparent;
            }}
        """

    @staticmethod
    def get_prompt_style() -> str:
        return f"font-size: 12pt; font-weight: 900; color: {ColorPalette.CARD_PROMPT_TEXT};"

    @staticmethod
    def get_target_style() -> str:
        return f"font-size: 26pt; font-weight: 600; color: {ColorPalette.CARD_TARGET_TEXT};"

    @staticmethod
    def get_flag_button_style() -> str:
        return f"""
            QPushButton {{
                background: transparent;
                border: 2px solid transparent;
                border-radius: 12px;
                padding: 4px;
            }}
            QPushButton:hover {{
                border: 2px solid {ColorPalette.FLAG_HOVER_BORDER};
            }}
        """

    @staticmethod
    def get_score_style() -> str:
        return f"font-size: 20pt; font-weight: bold; color: {ColorPalette.SCORE_TEXT}; background: transparent;"
