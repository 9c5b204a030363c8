"""FastAPI server that serves the browser version of the game."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel, StrictInt
import uvicorn

from flag_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from flag_quiz.constants.ui_constants import PROMPT_TEXT, WINDOW_TITLE
from flag_quiz.core.feedback import (
    Feedback,
    answer_feedback,
    game_over_feedback,
    outcome_score_text,
    round_text,
    score_text,
)
from flag_quiz.core.flag_assets import flag_path
from flag_quiz.core.models import AnswerOutcome, SessionSnapshot
from flag_quiz.core.quiz_manager import QuizManager

logger = logging.getLogger(__name__)

_GAME_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>__TITLE__</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: system-ui, sans-serif; }
      body { margin: 0; min-height: 100vh; display: flex; flex-direction: column; align-items: center; justify-content: center; gap: 1.5rem;
             background: radial-gradient(circle at top, #1a3373 10%, #c22642 50%, #e6b333 80%); }
      h1 { margin: 0; font-size: 2.5rem; color: #0a84ff; }
      .card { width: min(90vw, 420px); background: rgba(242, 242, 247, 0.85); border-radius: 20px; padding: 1.25rem 0;
              display: flex; flex-direction: column; align-items: center; gap: 15px; }
      #prompt { font-weight: 900; color: #6e6e73; }
      #target { font-size: 2rem; font-weight: 600; color: #1c1c1e; }
      .flag-button { border: none; background: transparent; padding: 0; cursor: pointer; }
      .flag-button img { width: 200px; height: 100px; object-fit: cover; border-radius: 50px; box-shadow: 0 0 5px rgba(0, 0, 0, 0.6); }
      .flag-button:disabled { cursor: not-allowed; opacity: 0.6; }
      #score, #round { color: #fff; font-size: 1.6rem; font-weight: bold; margin: 0; }
      #round { font-size: 1rem; }
      dialog { border: none; border-radius: 14px; padding: 1.25rem 1.5rem; text-align: center; max-width: 320px; }
      dialog button { margin-top: 0.75rem; border: none; border-radius: 8px; padding: 0.5rem 1.25rem; background: #0a84ff; color: #fff; font-size: 1rem; cursor: pointer; }
    </style>
  </head>
  <body>
    <h1>__TITLE__</h1>
    <section class=\"card\">
      <span id=\"prompt\">__PROMPT__</span>
      <span id=\"target\"></span>
      <div id=\"flags\"></div>
    </section>
    <p id=\"score\"></p>
    <p id=\"round\"></p>
    <dialog id=\"feedback\">
      <h2 id=\"feedback-title\"></h2>
      <p id=\"feedback-message\"></p>
      <button id=\"feedback-button\"></button>
    </dialog>
    <script>
      const flagsEl = document.getElementById('flags');
      const targetEl = document.getElementById('target');
      const scoreEl = document.getElementById('score');
      const roundEl = document.getElementById('round');
      const dialog = document.getElementById('feedback');
      const dialogTitle = document.getElementById('feedback-title');
      const dialogMessage = document.getElementById('feedback-message');
      const dialogButton = document.getElementById('feedback-button');
      let busy = false;

      function render(state) {
        targetEl.textContent = state.target_country;
        scoreEl.textContent = state.score_text;
        roundEl.textContent = state.round_text;
        flagsEl.innerHTML = '';
        state.options.forEach((country, index) => {
          const button = document.createElement('button');
          button.className = 'flag-button';
          button.disabled = state.is_game_over || state.pending_feedback !== null;
          const img = document.createElement('img');
          img.src = `/flags/${encodeURIComponent(country)}`;
          img.alt = 'Flag ' + (index + 1);
          button.appendChild(img);
          button.addEventListener('click', () => submitAnswer(index));
          const row = document.createElement('div');
          row.appendChild(button);
          flagsEl.appendChild(row);
        });
      }

      function showDialog(feedback) {
        return new Promise(resolve => {
          dialogTitle.textContent = feedback.title;
          dialogMessage.textContent = feedback.message;
          dialogButton.textContent = feedback.button_text;
          dialogButton.onclick = () => { dialog.close(); resolve(); };
          dialog.showModal();
        });
      }

      async function post(path, body) {
        const response = await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body || {})
        });
        const payload = await response.json().catch(() => ({}));
        if (!response.ok) {
          throw new Error(payload.detail || 'Request failed');
        }
        return payload;
      }

      async function finishRound(gameOverFeedback) {
        if (gameOverFeedback) {
          await showDialog(gameOverFeedback);
          render(await post('/restart'));
        } else {
          render(await post('/next'));
        }
      }

      // Picks up a round that was answered but never continued (reload, second tab).
      async function resume() {
        const state = await (await fetch('/state')).json();
        render(state);
        if (state.pending_feedback === null && state.game_over_feedback === null) {
          return;
        }
        busy = true;
        try {
          if (state.pending_feedback !== null) {
            await showDialog(state.pending_feedback);
          }
          await finishRound(state.game_over_feedback);
        } finally {
          busy = false;
        }
      }

      async function submitAnswer(index) {
        if (busy) return;
        busy = true;
        let failed = false;
        try {
          const result = await post('/answer', { choice_index: index });
          scoreEl.textContent = result.score_text;
          await showDialog(result.feedback);
          await finishRound(result.game_over_feedback);
        } catch (error) {
          console.error(error);
          failed = true;
        } finally {
          busy = false;
        }
        if (failed) {
          await resume();
        }
      }

      resume();
    </script>
  </body>
</html>
""".replace("__TITLE__", WINDOW_TITLE).replace("__PROMPT__", PROMPT_TEXT)


class AnswerPayload(BaseModel):
    """Payload schema for a tapped flag."""

    choice_index: StrictInt


class FeedbackResponse(BaseModel):
    """Dialog contents for the browser page."""

    title: str
    message: str
    button_text: str


class OutcomeResponse(BaseModel):
    """Result of the answered round."""

    is_correct: bool
    choice_index: int
    correct_country: str
    chosen_country: str
    score: int
    rounds_played: int
    is_game_over: bool


class StateResponse(BaseModel):
    """Snapshot of the game as the page needs it to draw and resume.

    While the round on screen has been answered but not continued,
    ``last_outcome`` and ``pending_feedback`` describe that answer;
    ``game_over_feedback`` is set once the final round has been played.
    """

    options: list[str]
    target_country: str
    score: int
    rounds_played: int
    total_rounds: int
    is_game_over: bool
    state: str
    score_text: str
    round_text: str
    last_outcome: OutcomeResponse | None = None
    pending_feedback: FeedbackResponse | None = None
    game_over_feedback: FeedbackResponse | None = None


class AnswerResponse(OutcomeResponse):
    """Outcome of a submitted answer with the dialogs to show for it."""

    score_text: str
    feedback: FeedbackResponse
    game_over_feedback: FeedbackResponse | None = None


def _feedback_response(feedback: Feedback) -> FeedbackResponse:
    return FeedbackResponse(
        title=feedback.title,
        message=feedback.message,
        button_text=feedback.button_text,
    )


def _outcome_fields(outcome: AnswerOutcome) -> dict[str, object]:
    return {
        "is_correct": outcome.is_correct,
        "choice_index": outcome.choice_index,
        "correct_country": outcome.correct_country,
        "chosen_country": outcome.chosen_country,
        "score": outcome.score,
        "rounds_played": outcome.rounds_played,
        "is_game_over": outcome.is_game_over,
    }


def _state_response(snapshot: SessionSnapshot) -> StateResponse:
    pending = snapshot.pending_outcome
    final = None
    if snapshot.is_game_over:
        final = _feedback_response(game_over_feedback(snapshot.score, snapshot.rounds_played))
    return StateResponse(
        options=list(snapshot.options),
        target_country=snapshot.target_country,
        score=snapshot.score,
        rounds_played=snapshot.rounds_played,
        total_rounds=snapshot.total_rounds,
        is_game_over=snapshot.is_game_over,
        state=snapshot.state.name.lower(),
        score_text=score_text(snapshot),
        round_text=round_text(snapshot),
        last_outcome=None if pending is None else OutcomeResponse(**_outcome_fields(pending)),
        pending_feedback=None if pending is None else _feedback_response(answer_feedback(pending)),
        game_over_feedback=final,
    )


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title="Guess the Flag API", version="0.1.0")
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_game_page() -> str:
        return _GAME_PAGE_HTML

    @app.get("/flags/{country}")
    def get_flag(country: str, manager: QuizManager = Depends(quiz_manager_dep)) -> FileResponse:
        path = flag_path(country) if manager.is_known_country(country) else None
        if path is None:
            raise HTTPException(status_code=404, detail=f"No flag for {country!r}.")
        return FileResponse(path, media_type="image/svg+xml")

    @app.get("/state", response_model=StateResponse)
    def get_state(manager: QuizManager = Depends(quiz_manager_dep)) -> StateResponse:
        return _state_response(manager.snapshot())

    @app.post("/answer", response_model=AnswerResponse)
    def submit_answer(
        payload: AnswerPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> AnswerResponse:
        try:
            outcome = manager.submit_answer(payload.choice_index)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

        final = None
        if outcome.is_game_over:
            final = _feedback_response(game_over_feedback(outcome.score, outcome.rounds_played))
        return AnswerResponse(
            **_outcome_fields(outcome),
            score_text=outcome_score_text(outcome),
            feedback=_feedback_response(answer_feedback(outcome)),
            game_over_feedback=final,
        )

    @app.post("/next", response_model=StateResponse)
    def next_round(manager: QuizManager = Depends(quiz_manager_dep)) -> StateResponse:
        return _state_response(manager.advance())

    @app.post("/restart", response_model=StateResponse)
    def restart(manager: QuizManager = Depends(quiz_manager_dep)) -> StateResponse:
        logger.info("Browser game restarted")
        return _state_response(manager.restart())

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="FlagQuizApiServer", daemon=True)
    thread.start()
    return thread
