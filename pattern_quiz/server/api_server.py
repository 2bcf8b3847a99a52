"""FastAPI server that exposes the quiz to learners in a browser."""

from __future__ import annotations

from collections.abc import Sequence
from threading import Lock, Thread
import logging
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel
import uvicorn

from pattern_quiz.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from pattern_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT, MAX_LEARNER_SESSIONS
from pattern_quiz.constants.ui_constants import RATING_MESSAGES
from pattern_quiz.core.exceptions import InvalidOptionError, QuizError
from pattern_quiz.core.explanation_renderer import renderer
from pattern_quiz.core.models import Question, QuizViewState
from pattern_quiz.core.quiz_controller import QuizController

logger = logging.getLogger(__name__)

_LEARNER_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>PatternQuiz</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #f5f7fb; color: #1f2937; }
      body { margin: 0; padding: 1.5rem; display: flex; justify-content: center; }
      .quiz-container { max-width: 46rem; width: 100%; background: #fff; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.08); }
      .hidden { display: none; }
      .quiz-question { font-size: 1.15rem; margin-bottom: 1rem; }
      .quiz-option { border: 2px solid #d1d5db; border-radius: 0.5rem; padding: 0.75rem 1rem; margin-bottom: 0.5rem; cursor: pointer; }
      .quiz-option.selected { border-color: #0078d4; background: #e8f4fc; }
      .quiz-option.correct { border-color: #107c10; background: #e6f4e6; }
      .quiz-option.incorrect { border-color: #d13438; background: #fbe9e9; }
      .quiz-option.locked { cursor: default; }
      .quiz-explanation { margin-top: 1rem; padding: 1rem; border-left: 4px solid #0078d4; background: #f0f6fc; }
      .quiz-buttons { display: flex; gap: 0.75rem; margin-top: 1rem; }
      .quiz-button { border: none; border-radius: 0.5rem; padding: 0.7rem 1.4rem; font-size: 1rem; background: #0078d4; color: #fff; cursor: pointer; }
      .quiz-button:disabled { opacity: 0.5; cursor: not-allowed; }
      .quiz-progress { display: flex; align-items: center; gap: 0.75rem; margin-top: 1.25rem; }
      .quiz-progress-bar { flex: 1; height: 0.6rem; background: #e5e7eb; border-radius: 999px; overflow: hidden; }
      .quiz-progress-fill { height: 100%; background: #0078d4; width: 0; transition: width 300ms ease; }
    </style>
  </head>
  <body>
    <section class=\"quiz-container\">
      <div id=\"quiz-card\">
        <h3 id=\"header\"></h3>
        <div id=\"question\" class=\"quiz-question\"></div>
        <div id=\"options\"></div>
        <div id=\"explanation\" class=\"quiz-explanation hidden\"></div>
        <div class=\"quiz-buttons\">
          <button id=\"check\" class=\"quiz-button\">Check</button>
          <button id=\"next\" class=\"quiz-button\">Next</button>
        </div>
        <div class=\"quiz-progress\">
          <span id=\"answered\"></span>
          <div class=\"quiz-progress-bar\"><div id=\"fill\" class=\"quiz-progress-fill\"></div></div>
          <span id=\"total\"></span>
        </div>
      </div>
      <div id=\"summary-card\" class=\"hidden\">
        <h3>Quiz completed!</h3>
        <p id=\"score\"></p>
        <p id=\"rating\"></p>
        <button id=\"restart\" class=\"quiz-button\">Restart Quiz</button>
      </div>
    </section>
    <script>
      let sessionId = null;
      let view = null;

      async function call(method, path, body) {
        const response = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined,
        });
        const payload = await response.json();
        if (!response.ok) {
          console.warn('Rejected action', payload);
          return;
        }
        if (payload.session_id) sessionId = payload.session_id;
        view = payload.view ?? payload;
        render();
      }

      function render() {
        document.getElementById('quiz-card').classList.toggle('hidden', view.finished);
        document.getElementById('summary-card').classList.toggle('hidden', !view.finished);
        if (view.finished) {
          const summary = view.summary;
          document.getElementById('score').textContent =
            `You answered ${summary.correct_count} of ${summary.question_count} questions correctly. Score: ${summary.score_percent}%`;
          document.getElementById('rating').textContent = summary.rating_message;
          return;
        }
        document.getElementById('header').textContent = `Question ${view.question_number} of ${view.question_count}`;
        document.getElementById('question').textContent = view.prompt;
        const options = document.getElementById('options');
        options.innerHTML = '';
        view.options.forEach((option) => {
          const el = document.createElement('div');
          el.className = `quiz-option ${option.status === 'neutral' ? '' : option.status}`;
          if (!view.selectable) el.classList.add('locked');
          el.textContent = option.text;
          if (view.selectable) el.onclick = () => call('POST', `/api/sessions/${sessionId}/select`, { option_index: option.index });
          options.appendChild(el);
        });
        const explanation = document.getElementById('explanation');
        explanation.classList.toggle('hidden', !view.explanation_visible);
        if (view.explanation_visible) {
          const verdict = view.is_correct ? 'Correct! ' : 'Incorrect! ';
          explanation.innerHTML = `<strong>${verdict}</strong>${view.explanation_html}`;
        }
        document.getElementById('check').disabled = !view.can_check;
        const next = document.getElementById('next');
        next.textContent = view.next_label;
        next.disabled = !(view.can_next || view.can_finish);
        document.getElementById('answered').textContent = view.progress.answered_count;
        document.getElementById('total').textContent = view.progress.question_count;
        document.getElementById('fill').style.width = `${view.progress.percent_complete}%`;
      }

      document.getElementById('check').onclick = () => call('POST', `/api/sessions/${sessionId}/check`);
      document.getElementById('next').onclick = () =>
        call('POST', `/api/sessions/${sessionId}/${view.can_finish ? 'finish' : 'next'}`);
      document.getElementById('restart').onclick = () => call('POST', `/api/sessions/${sessionId}/restart`);
      window.addEventListener('pagehide', () => {
        if (sessionId) fetch(`/api/sessions/${sessionId}`, { method: 'DELETE', keepalive: true });
      });
      call('POST', '/api/sessions');
    </script>
  </body>
</html>
"""


class SelectPayload(BaseModel):
    """Payload schema for option selection."""

    option_index: int


class SessionStore:
    """In-memory registry of quiz controllers, one per learner page.

    Pages discard their session when they are hidden. Sessions that are never
    discarded are evicted oldest first once `max_sessions` is reached.
    """

    def __init__(self, questions: Sequence[Question], max_sessions: int = MAX_LEARNER_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._lock = Lock()
        self._max_sessions = max_sessions
        self._questions: tuple[Question, ...] = tuple(questions)
        self._controllers: dict[str, QuizController] = {}

    def create(self) -> tuple[str, QuizViewState]:
        with self._lock:
            controller = QuizController(self._questions)
            session_id = uuid4().hex
            while len(self._controllers) >= self._max_sessions:
                evicted = next(iter(self._controllers))
                del self._controllers[evicted]
                logger.info("Evicted quiz session %s (limit %d)", evicted, self._max_sessions)
            self._controllers[session_id] = controller
            logger.info("Created quiz session %s", session_id)
            return session_id, controller.view_state()

    def discard(self, session_id: str) -> None:
        with self._lock:
            if self._controllers.pop(session_id, None) is None:
                raise KeyError(session_id)
            logger.info("Discarded quiz session %s", session_id)

    def apply(self, session_id: str, action: str, *args: int) -> QuizViewState:
        """Run one controller action under the store lock."""
        with self._lock:
            controller = self._controllers.get(session_id)
            if controller is None:
                raise KeyError(session_id)
            handler = getattr(controller, action)
            return handler(*args)

    def __len__(self) -> int:
        with self._lock:
            return len(self._controllers)


def serialize_view(view: QuizViewState) -> dict[str, object]:
    """Convert a view state into JSON-ready primitives."""
    progress = view.progress
    summary = view.summary
    return {
        "question_id": view.question_id,
        "question_number": view.question_number,
        "question_count": view.question_count,
        "prompt": view.prompt,
        "options": [
            {"index": option.index, "text": option.text, "status": option.status.value}
            for option in view.options
        ],
        "question_state": view.question_state.value,
        "is_correct": view.is_correct,
        "explanation_visible": view.explanation_visible,
        "explanation": view.explanation,
        "explanation_html": renderer.render_fragment(view.explanation) if view.explanation else None,
        "can_check": view.can_check,
        "can_next": view.can_next,
        "can_finish": view.can_finish,
        "next_label": view.next_label,
        "selectable": view.selectable,
        "progress": {
            "answered_count": progress.answered_count,
            "correct_count": progress.correct_count,
            "question_count": progress.question_count,
            "percent_complete": progress.percent_complete,
            "position": progress.position,
        },
        "finished": view.finished,
        "summary": None
        if summary is None
        else {
            "correct_count": summary.correct_count,
            "question_count": summary.question_count,
            "score_percent": summary.score_percent,
            "rating": summary.rating.value,
            "rating_message": RATING_MESSAGES[summary.rating.value],
        },
    }


def _get_store_dependency(store: SessionStore):
    def dependency() -> SessionStore:
        return store

    return dependency


def create_api_app(questions: Sequence[Question], max_sessions: int = MAX_LEARNER_SESSIONS) -> FastAPI:
    """Create a FastAPI application serving the given questions."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION, description=APP_ABOUT_TEXT)
    store = SessionStore(questions, max_sessions=max_sessions)
    app.state.session_store = store
    store_dep = _get_store_dependency(store)

    @app.exception_handler(QuizError)
    async def handle_quiz_error(request: Request, exc: QuizError) -> JSONResponse:
        status_code = 422 if isinstance(exc, InvalidOptionError) else 409
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    def run_action(store: SessionStore, session_id: str, action: str, *args: int) -> dict[str, object]:
        try:
            view = store.apply(session_id, action, *args)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="session_not_found") from exc
        return serialize_view(view)

    @app.get("/", response_class=HTMLResponse)
    def serve_learner_page() -> str:
        return _LEARNER_PAGE_HTML

    @app.post("/api/sessions", status_code=201)
    def create_session(sessions: SessionStore = Depends(store_dep)) -> dict[str, object]:
        session_id, view = sessions.create()
        return {"session_id": session_id, "view": serialize_view(view)}

    @app.get("/api/sessions/{session_id}")
    def get_view(session_id: str, sessions: SessionStore = Depends(store_dep)) -> dict[str, object]:
        return run_action(sessions, session_id, "view_state")

    @app.post("/api/sessions/{session_id}/select")
    def select_option(
        session_id: str,
        payload: SelectPayload,
        sessions: SessionStore = Depends(store_dep),
    ) -> dict[str, object]:
        return run_action(sessions, session_id, "on_option_click", payload.option_index)

    @app.post("/api/sessions/{session_id}/check")
    def check_answer(session_id: str, sessions: SessionStore = Depends(store_dep)) -> dict[str, object]:
        return run_action(sessions, session_id, "on_check_click")

    @app.post("/api/sessions/{session_id}/next")
    def next_question(session_id: str, sessions: SessionStore = Depends(store_dep)) -> dict[str, object]:
        return run_action(sessions, session_id, "on_next_click")

    @app.post("/api/sessions/{session_id}/finish")
    def finish_quiz(session_id: str, sessions: SessionStore = Depends(store_dep)) -> dict[str, object]:
        return run_action(sessions, session_id, "on_finish_click")

    @app.post("/api/sessions/{session_id}/restart")
    def restart_quiz(session_id: str, sessions: SessionStore = Depends(store_dep)) -> dict[str, object]:
        return run_action(sessions, session_id, "on_restart_click")

    @app.delete("/api/sessions/{session_id}", status_code=204)
    def discard_session(session_id: str, sessions: SessionStore = Depends(store_dep)) -> None:
        try:
            sessions.discard(session_id)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="session_not_found") from exc

    return app


def start_api_server(
    questions: Sequence[Question],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(questions)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    return thread
