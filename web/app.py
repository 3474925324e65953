"""Word Hunt web application — Flask backend."""
from __future__ import annotations

import sys
import time
from pathlib import Path

# Ensure project root is on sys.path so `wordhunt.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from wordhunt.constants import MIN_WORD_LENGTH
from wordhunt.grid import Grid, IncompleteGrid, MalformedGrid
from wordhunt.lexicon import DictionaryUnavailable, Lexicon, load_default_lexicon
from wordhunt.ranking import rank, total_points, visible, word_points
from wordhunt.solver import FoundWord, search

app = Flask(__name__)

# Loaded on first request; tests swap in a small lexicon
LEXICON: Lexicon | None = None


def get_lexicon() -> Lexicon:
    global LEXICON
    if LEXICON is None:
        LEXICON = load_default_lexicon()
        print(f"Dictionary loaded: {LEXICON.word_count} words")
    return LEXICON


def results_to_json(ranked: list[FoundWord], limit: int | None = None) -> dict:
    """Serialize ranked words to the JSON format returned by /solve."""
    shown = ranked if limit is None else visible(ranked, limit)
    return {
        "words": [
            {
                "word": fw.word,
                "path": [list(coord) for coord in fw.path],
                "points": word_points(fw.word),
            }
            for fw in shown
        ],
        "count": len(ranked),
        "shown": len(shown),
        "total_points": total_points(ranked),
    }


@app.route("/health")
def health():
    try:
        lexicon = get_lexicon()
    except DictionaryUnavailable as e:
        return jsonify({"status": "error", "error": str(e)}), 503
    return jsonify({"status": "ok", "word_count": lexicon.word_count})


@app.route("/solve", methods=["POST"])
def solve_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "No grid rows provided"}), 400
    rows = data.get("rows")
    if isinstance(rows, str):
        rows = rows.split()
    if not rows or not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        return jsonify({"error": "No grid rows provided"}), 400

    try:
        min_length = int(data.get("min_length", MIN_WORD_LENGTH))
        limit = data.get("limit")
        limit = int(limit) if limit is not None else None
    except (TypeError, ValueError):
        return jsonify({"error": "min_length and limit must be integers"}), 400
    if min_length < 1:
        return jsonify({"error": "min_length must be at least 1"}), 400

    try:
        lexicon = get_lexicon()
    except DictionaryUnavailable as e:
        return jsonify({"error": str(e)}), 503

    try:
        grid = Grid.from_rows(rows)
        start = time.time()
        ranked = rank(search(grid, lexicon, min_length))
    except IncompleteGrid as e:
        return jsonify({"error": str(e), "blanks": [list(c) for c in e.blanks]}), 400
    except MalformedGrid as e:
        return jsonify({"error": str(e)}), 400

    result = results_to_json(ranked, limit)
    result["rows"] = grid.rows
    result["elapsed"] = round(time.time() - start, 4)
    return jsonify(result)


if __name__ == "__main__":
    try:
        get_lexicon()
    except DictionaryUnavailable as e:
        print(e)
        sys.exit(1)
    app.run(debug=True, host="0.0.0.0", port=8080)
