from collections import Counter
from flask import Flask, jsonify
import threading
from grimoire.role_data import RoleStore

# -----------------------------
# Flask app to keep bot alive
# -----------------------------
def create_app(store: RoleStore) -> Flask:
    app = Flask("grimoire")

    @app.route("/")
    def home():
        return "Bot is alive!", 200

    @app.route("/health")
    def health():
        roles = store.roles()  # One snapshot so the count and categories agree
        categories = Counter(role.type or "unknown" for role in roles)
        return jsonify(status="ok", roles=len(roles), categories=dict(categories)), 200

    return app

def start_webserver(store: RoleStore, port: int) -> threading.Thread:
    app = create_app(store)
    thread = threading.Thread(
        target=app.run,
        kwargs={"host": "0.0.0.0", "port": port},
        daemon=True,
    )
    thread.start()
    return thread
