"""
STAY - journaling, hope gallery and crisis resources for teens.
JSON API behind the web client. Journal data stays in a local file.
"""

import logging
import random
from functools import wraps

from flask import Flask, request, jsonify
from flask_cors import CORS

import ai
import config
import gallery
import resources
import store
from insights import categorize, generate_insight
from models import MOODS, NotFoundError, ValidationError, parse_entries, parse_moods

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(config.Config)
CORS(app)

if config.GROQ_API_KEY:
    logger.info("Groq API configured for the chat companion")
else:
    logger.warning("No GROQ_API_KEY found. Chat will answer with errors until one is set")


# =============================================================================
# Request Handling
# =============================================================================

def handle_errors(f):
    """Decorator for consistent error handling."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            logger.error(f"Error in {f.__name__}: {e}")
            return jsonify({"error": "An unexpected error occurred"}), 500
    return wrapper


def json_body():
    body = request.get_json(silent=True)
    if body is None:
        raise ValidationError("No data provided")
    return body


def check_kind(kind: str) -> str:
    if kind not in gallery.KINDS:
        raise NotFoundError(f"Unknown gallery '{kind}'")
    return kind


# =============================================================================
# Insights
# =============================================================================

@app.route("/api/insights", methods=["POST"])
@handle_errors
def insights():
    """Answer a journal analytics question or describe a graph."""
    body = json_body()
    if not isinstance(body, dict):
        raise ValidationError("Invalid data format")

    insight_type = body.get("type")
    question = body.get("question")
    entries = parse_entries(body.get("entries"))
    moods = parse_moods(body.get("moods"))
    tags = body.get("tags")
    tags = [str(t) for t in tags] if isinstance(tags, list) else []

    if config.INSIGHTS_USE_AI and insight_type in ("chat", "mood-graph", "category-graph"):
        try:
            insight = ai.generate(
                ai.insights_prompt(entries, moods, tags, question),
                system_prompt=ai.INSIGHTS_SYSTEM_PROMPT,
            )
            return jsonify({"insight": insight, "ai_generated": True})
        except ai.AIUnavailableError:
            logger.warning("AI insights unavailable, using rule-based answer")

    insight = generate_insight(insight_type, entries, moods, tags, question)
    return jsonify({"insight": insight, "ai_generated": False})


@app.route("/api/categorize", methods=["POST"])
@handle_errors
def categorize_text():
    body = json_body()
    text = body.get("text", "") if isinstance(body, dict) else ""
    if not isinstance(text, str):
        raise ValidationError("Text must be a string")
    return jsonify({"category": categorize(text).value})


@app.route("/api/moods", methods=["GET"])
def get_moods():
    return jsonify([m.to_dict() for m in MOODS])


# =============================================================================
# Journal Entries
# =============================================================================

@app.route("/api/entries", methods=["GET"])
@handle_errors
def get_entries():
    """Get all entries, newest first."""
    return jsonify([e.to_dict() for e in store.list_entries()])


@app.route("/api/entries", methods=["POST"])
@handle_errors
def save_entry():
    """Save a new entry; the category is assigned from its text when missing."""
    entry = store.add_entry(json_body())
    return jsonify({"saved": True, "entry": entry.to_dict()}), 201


@app.route("/api/prompt", methods=["GET"])
@handle_errors
def journal_prompt():
    """A writing prompt the journal has not answered yet."""
    return jsonify({"prompt": store.next_prompt()})


# =============================================================================
# Data Management Routes
# =============================================================================

@app.route("/api/export", methods=["GET"])
@handle_errors
def export_data():
    """Export all journal entries."""
    return jsonify(store.export_entries())


@app.route("/api/import", methods=["POST"])
@handle_errors
def import_data():
    """Import journal entries from a backup (a list, or {"entries": [...]})."""
    body = json_body()
    replace = False
    if isinstance(body, dict):
        if "entries" not in body:
            raise ValidationError("Missing 'entries' field")
        replace = bool(body.get("replace", False))
        body = body["entries"]

    count = store.import_entries(body, replace=replace)
    return jsonify({"imported": True, "entries_count": count})


@app.route("/api/clear", methods=["DELETE"])
@handle_errors
def clear_data():
    """Clear all journal and gallery data."""
    if store.clear_data():
        return jsonify({"cleared": True})
    return jsonify({"error": "Failed to clear data"}), 500


# =============================================================================
# Hope Gallery Routes
# =============================================================================

@app.route("/api/hope/<kind>", methods=["GET"])
@handle_errors
def list_gallery(kind: str):
    items = store.load_gallery(check_kind(kind))
    shown = gallery.visible(
        items,
        category=request.args.get("category", "all"),
        query=request.args.get("q", ""),
        sort=request.args.get("sort", "newest"),
    )
    return jsonify(shown)


@app.route("/api/hope/<kind>", methods=["POST"])
@handle_errors
def add_gallery_item(kind: str):
    kind = check_kind(kind)
    body = json_body()
    if not isinstance(body, dict):
        raise ValidationError("Invalid data format")

    items = store.load_gallery(kind)
    item_id = store.next_id(items)
    if kind == "photos":
        items = items + [gallery.new_photo(item_id, body)]
    else:
        items = [gallery.new_story(item_id, body)] + items

    store.save_gallery(kind, items)
    return jsonify(gallery.find(items, item_id)), 201


@app.route("/api/hope/<kind>/<item_id>/<action>", methods=["POST"])
@handle_errors
def update_gallery_item(kind: str, item_id: str, action: str):
    """React to, comment on, report, or toggle privacy of a photo or story."""
    kind = check_kind(kind)
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    items = store.load_gallery(kind)

    if action == "react":
        items = gallery.react(items, item_id, body.get("reaction", "likes"))
    elif action == "comment":
        comments = gallery.find(items, item_id).get("comments") or []
        items = gallery.add_comment(items, item_id, store.next_id(comments), body.get("text"), body.get("author"))
    elif action == "report":
        items = gallery.report(items, item_id)
        logger.info(f"{kind} item {item_id} reported")
    elif action == "privacy":
        items = gallery.toggle_privacy(items, item_id)
    else:
        raise NotFoundError(f"Unknown action '{action}'")

    store.save_gallery(kind, items)
    return jsonify(gallery.find(items, item_id))


@app.route("/api/hope/prompt", methods=["GET"])
def story_prompt():
    return jsonify({"prompt": random.choice(gallery.STORY_PROMPTS)})


# =============================================================================
# Chat Companion
# =============================================================================

@app.route("/api/chat", methods=["POST"])
def chat():
    """Forward a message to the hosted model with the companion system prompt."""
    if not request.is_json:
        return jsonify({"error": "Only JSON requests are supported"}), 400

    body = request.get_json(silent=True) or {}
    message = body.get("message") if isinstance(body, dict) else None
    if not isinstance(message, str) or not message.strip():
        return jsonify({"error": "Message is required"}), 400
    system_prompt = body.get("systemPrompt") or ai.SYSTEM_PROMPT

    try:
        return jsonify({"message": ai.generate(message, system_prompt=system_prompt)})
    except ai.AIUnavailableError as e:
        logger.error(f"Chat API error: {e}")
        return jsonify({"error": "Failed to process your message"}), 500


@app.route("/api/chat", methods=["GET"])
def chat_history():
    """Chat history is kept by the client; the server stores none."""
    return jsonify({"history": []})


# =============================================================================
# Crisis Resources
# =============================================================================

@app.route("/api/resources", methods=["GET"])
@handle_errors
def get_resources():
    """National hotlines plus local services by state/city or by coordinates."""
    state = request.args.get("state")
    city = request.args.get("city")
    lat = request.args.get("lat", type=float)
    lon = request.args.get("lon", type=float)
    limit = request.args.get("limit", default=3, type=int)

    response = {
        "national": list(resources.NATIONAL_RESOURCES),
        "tips": list(resources.COPING_TIPS),
        "states": resources.states(),
    }
    if state:
        response["cities"] = resources.cities(state)
        response["local"] = resources.find(state, city)
    if lat is not None and lon is not None:
        response["nearest"] = resources.nearest(lat, lon, limit)
    return jsonify(response)


@app.route("/api/affirmation", methods=["GET"])
def get_affirmation():
    index = request.args.get("index", type=int)
    if index is None:
        index = random.randrange(len(resources.AFFIRMATIONS))
    return jsonify({"affirmation": resources.affirmation(index), "index": index % len(resources.AFFIRMATIONS)})


# =============================================================================
# Main
# =============================================================================

if __name__ == "__main__":
    logger.info("Starting STAY server...")
    logger.info(f"Journal data file: {config.DATA_FILE}")
    app.run(debug=config.DEBUG, port=config.PORT)
