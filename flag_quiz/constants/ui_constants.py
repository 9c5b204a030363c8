"""Text shown by the desktop window and the browser page."""

WINDOW_TITLE: str = "Guess the Flag"
PROMPT_TEXT: str = "Tap the flag of"
SCORE_TEMPLATE: str = "Score: {score}"
ROUND_TEMPLATE: str = "Round {round} of {total}"

CORRECT_TITLE: str = "Correct"
CORRECT_MESSAGE_TEMPLATE: str = "You're right! {country} is the right answer!"
WRONG_TITLE: str = "Wrong"
WRONG_MESSAGE_TEMPLATE: str = "Oops! This flag is {correct}. You chose {chosen} instead."
GAME_OVER_TITLE: str = "Game Over"
GAME_OVER_MESSAGE_TEMPLATE: str = "Your score is {score} out of {total}."

CONTINUE_BUTTON: str = "Continue"
RESTART_BUTTON: str = "Restart"

FLAG_BUTTON_WIDTH: int = 200
FLAG_BUTTON_HEIGHT: int = 100
