"""
GreenLedger Assistant — Chat API Backend
Runs on port 5009 with /chat and /execute endpoints.

Usage:
    python server.py

Endpoints:
    POST http://localhost:5009/chat
    Body: {"message": "...", "role": "farmer", "user": {...}, "history": [...]}

    POST http://localhost:5009/execute
    Body: {"action": "create_payment", "params": {...}, "role": "farmer", "user": {...}}
"""

from datetime import datetime, timezone
from dotenv import load_dotenv

load_dotenv()

from flask import Flask, jsonify
from flask_cors import CORS

from routes.chat import chat_bp
from handlers import FUNCTION_HANDLERS
from intent_patterns import TRIGGER_TABLE_VERSION
from chat_logger import get_logger
from config.settings import PORT, DEBUG, STORE_BACKEND, SIMULATE_LATENCY

logger = get_logger("greenledger_chat")

# ═══════════════════════════════════════════
# FLASK APP
# ═══════════════════════════════════════════

app = Flask(__name__)
CORS(app)
app.register_blueprint(chat_bp)


@app.route("/health", methods=["GET"])
def health():
    """Health check endpoint."""
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "engine": {
            "handlers_registered": len(FUNCTION_HANDLERS),
            "trigger_table_version": TRIGGER_TABLE_VERSION,
            "store_backend": STORE_BACKEND,
            "simulate_latency": SIMULATE_LATENCY,
        },
    })


# ═══════════════════════════════════════════
# STARTUP
# ═══════════════════════════════════════════

if __name__ == "__main__":
    print("=" * 60)
    print("  GreenLedger Assistant — Chat API Server")
    print("=" * 60)
    print()
    logger.info(f"Server starting | port={PORT} | store={STORE_BACKEND} | debug={DEBUG}")
    print(f"🚀 Starting server on http://localhost:{PORT}")
    print(f"   POST http://localhost:{PORT}/chat")
    print(f"   POST http://localhost:{PORT}/execute")
    print(f"   GET  http://localhost:{PORT}/records/<record_type>")
    print(f"   GET  http://localhost:{PORT}/capabilities/<role>")
    print(f"   GET  http://localhost:{PORT}/health")
    print()

    app.run(
        host="0.0.0.0",
        port=PORT,
        debug=DEBUG,
    )
