"""Button showing one flag of the current round."""

from __future__ import annotations

from PySide6.QtCore import QSize
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QPushButton, QWidget

from flag_quiz.constants.ui_constants import FLAG_BUTTON_HEIGHT, FLAG_BUTTON_WIDTH
from flag_quiz.core.flag_assets import flag_path
from flag_quiz.styling.styles import Styles


class FlagButton(QPushButton):
    """Tappable flag image; falls back to the country name when no image exists."""

    def __init__(self, index: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.index = index
        self.country: str | None = None
        self.setIconSize(QSize(FLAG_BUTTON_WIDTH, FLAG_BUTTON_HEIGHT))
        self.setMinimumSize(FLAG_BUTTON_WIDTH + 16, FLAG_BUTTON_HEIGHT + 16)
        self.setStyleSheet(Styles.get_flag_button_style())

    def set_country(self, country: str) -> None:
        self.country = country
        path = flag_path(country)
        if path is None:
            self.setIcon(QIcon())
            self.setText(country)
        else:
            self.setIcon(QIcon(str(path)))
            self.setText("")
