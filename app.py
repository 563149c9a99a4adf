from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

from game import (
    Board,
    Cell,
    Coord,
    GameState,
    OthelloGame,
    parse_move,
    score,
    winner_for,
)


def _truthy(value: Optional[str]) -> bool:
    return (value or "").lower() in ("1", "true", "yes", "on")


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if _truthy(os.getenv("OTHELLO_DEBUG")) else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


logger = logging.getLogger(__name__)

# Serve static assets from ./static next to this file unless overridden
STATIC_DIR = os.path.abspath(
    os.getenv("OTHELLO_STATIC_DIR") or os.path.join(os.path.dirname(__file__), "static")
)
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


# ---------- JSON conversion ----------

def board_to_json(b: Board) -> Dict[str, Any]:
    return {"width": 8, "height": 8, "grid": [cell.value for cell in b.grid]}


def board_from_json(obj: Dict[str, Any]) -> Board:
    width = int(obj.get("width", 8))
    height = int(obj.get("height", 8))
    if width != 8 or height != 8:
        raise ValueError(f"only 8x8 boards are supported, got {width}x{height}")
    return Board([Cell(str(x)) for x in obj["grid"]])


def _player_from_json(value: Any) -> Cell:
    player = Cell(str(value))
    if player == Cell.EMPTY:
        raise ValueError("player must be 'B' or 'W'")
    return player


def state_to_json(s: GameState) -> Dict[str, Any]:
    counts = score(s.board)
    winner = winner_for(s.board).value if s.game_over else None
    return {
        "board": board_to_json(s.board),
        "current": s.current.value,
        "gameOver": bool(s.game_over),
        "passed": s.passed.value if s.passed is not None else None,
        "score": {"B": counts[Cell.BLACK], "W": counts[Cell.WHITE]},
        "winner": winner,
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    board = board_from_json(obj["board"])
    current = _player_from_json(obj.get("current", "B"))
    passed = obj.get("passed")
    return GameState(
        board=board,
        current=current,
        game_over=bool(obj.get("gameOver", False)),
        passed=_player_from_json(passed) if passed else None,
    )


def _moves_to_json(moves: List[Coord]) -> List[List[int]]:
    return [[int(r), int(c)] for (r, c) in moves]


def _move_from_json(value: Any) -> Coord:
    if isinstance(value, str):
        return parse_move(value)
    r, c = value
    for x in (r, c):
        if isinstance(x, bool) or not isinstance(x, int):
            raise ValueError(f"coordinates must be integers, got {value!r}")
    return r, c


def _load_game(body: Dict[str, Any]) -> Tuple[Optional[OthelloGame], Optional[Any]]:
    """Rebuilds the engine from the posted state, or returns a 400 response."""
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, (jsonify({"ok": False, "error": "state required"}), 400)
    try:
        return OthelloGame(json_to_state(s_in)), None
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        return None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


@app.get("/static/<path:filename>")
def static_files(filename: str) -> Any:
    return send_from_directory(app.static_folder, filename)


# ---------- Game API (used by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    game = OthelloGame()
    logger.info("new game")
    return jsonify({
        "ok": True,
        "state": state_to_json(game.state),
        "legalMoves": _moves_to_json(game.legal_moves()),
    })


@app.post("/api/legal")
def api_legal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return jsonify({"ok": False, "error": "state required"}), 400
    game, err = _load_game(body)
    if err is not None:
        return err
    player = None
    if body.get("player") is not None:
        try:
            player = _player_from_json(body["player"])
        except ValueError as e:
            return jsonify({"ok": False, "error": f"bad player: {e}"}), 400
    return jsonify({"ok": True, "legalMoves": _moves_to_json(game.legal_moves(player))})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return jsonify({"ok": False, "error": "state required"}), 400
    game, err = _load_game(body)
    if err is not None:
        return err
    try:
        move = _move_from_json(body["move"])
        player = _player_from_json(body["player"]) if body.get("player") is not None else None
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad move: {e}"}), 400

    legal = game.legal_moves()
    if game.is_game_over():
        error = "Game is over"
    elif player is not None and player != game.get_current_player():
        error = "Not your turn"
    else:
        error = "Illegal move"
    if not game.attempt_move(move[0], move[1], player):
        return jsonify({"ok": False, "error": error, "legalMoves": _moves_to_json(legal)}), 400

    passed = game.last_pass()
    return jsonify({
        "ok": True,
        "state": state_to_json(game.state),
        "legalMoves": _moves_to_json(game.legal_moves()),
        "flipped": _moves_to_json(game.last_flipped()),
        "passed": passed.value if passed is not None else None,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging()
    debug = _truthy(os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")))
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
