"""Qt main window implementing the Guess the Flag screen."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from flag_quiz.constants.quiz_constants import OPTIONS_PER_ROUND
from flag_quiz.constants.ui_constants import PROMPT_TEXT, WINDOW_TITLE
from flag_quiz.core.feedback import answer_feedback, game_over_feedback, round_text, score_text
from flag_quiz.core.services.quiz_session import QuizSession
from flag_quiz.styling.styles import Styles
from flag_quiz.ui.components.flag_button import FlagButton
from flag_quiz.ui.dialog_helpers import show_feedback

logger = logging.getLogger(__name__)


class FlagQuizWindow(QMainWindow):
    """Main Qt window rendering one QuizSession."""

    def __init__(self, session: QuizSession) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.session = session
        self.flag_buttons: list[FlagButton] = []

        self._build_ui()
        self._refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        central_widget.setObjectName("gameBackground")
        central_widget.setStyleSheet(Styles.get_background_style())
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(20, 20, 20, 20)
        central_widget.setLayout(root_layout)

        root_layout.addStretch(1)

        self.title_label = QLabel(WINDOW_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style())
        root_layout.addWidget(self.title_label)

        root_layout.addWidget(self._build_question_card())

        root_layout.addStretch(2)

        self.score_label = QLabel(self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_score_style())
        root_layout.addWidget(self.score_label)

        self.round_label = QLabel(self)
        self.round_label.setAlignment(Qt.AlignCenter)
        self.round_label.setStyleSheet(Styles.get_score_style())
        root_layout.addWidget(self.round_label)

        root_layout.addStretch(1)

    def _build_question_card(self) -> QFrame:
        card = QFrame(self)
        card.setObjectName("questionCard")
        card.setStyleSheet(Styles.get_card_style())

        layout = QVBoxLayout()
        layout.setSpacing(15)
        layout.setContentsMargins(0, 20, 0, 20)
        card.setLayout(layout)

        self.prompt_label = QLabel(PROMPT_TEXT, card)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        self.prompt_label.setStyleSheet(Styles.get_prompt_style())
        layout.addWidget(self.prompt_label)

        self.target_label = QLabel(card)
        self.target_label.setAlignment(Qt.AlignCenter)
        self.target_label.setStyleSheet(Styles.get_target_style())
        layout.addWidget(self.target_label)

        for index in range(OPTIONS_PER_ROUND):
            button = FlagButton(index, card)
            button.clicked.connect(lambda _checked=False, i=index: self._handle_flag_tapped(i))
            layout.addWidget(button, alignment=Qt.AlignHCenter)
            self.flag_buttons.append(button)

        return card

    def _refresh(self) -> None:
        snapshot = self.session.snapshot()
        self.target_label.setText(snapshot.target_country)
        for button, country in zip(self.flag_buttons, snapshot.options):
            button.set_country(country)
            button.setEnabled(not snapshot.is_game_over)
        self.score_label.setText(score_text(snapshot))
        self.round_label.setText(round_text(snapshot))

    def _handle_flag_tapped(self, index: int) -> None:
        if self.session.is_game_over:
            return
        outcome = self.session.submit_answer(index)
        self._refresh_score_only()
        show_feedback(self, answer_feedback(outcome))

        if outcome.is_game_over:
            show_feedback(self, game_over_feedback(outcome.score, outcome.rounds_played))
            logger.info("Restarting after a final score of %d", outcome.score)
            self.session.restart()
        else:
            self.session.new_round()
        self._refresh()

    def _refresh_score_only(self) -> None:
        self.score_label.setText(score_text(self.session.snapshot()))
