from flask import Flask, jsonify
from flask_cors import CORS
from config import Config
from utils.db import init_db_connection
from utils.logger import configure_logging
from utils.commands import register_commands

# Import controllers
from controllers.results_controller import results_bp
from controllers.auth_controller import auth_bp
from controllers.attendance_controller import attendance_bp


def create_app(config_object=Config):
    app = Flask(__name__)               # Initialize Flask app
    app.config.from_object(config_object)
    configure_logging(app)
    CORS(app)                           # Allow the frontend on another origin
    init_db_connection(app)             # Initialize MongoDB connection

    # Register Blueprint
    app.register_blueprint(results_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(attendance_bp)

    register_commands(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"success": False, "message": "Not found."}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"success": False, "message": "Method not allowed."}), 405

    return app


# Run the app
if __name__ == "__main__":
    app = create_app()
    app.logger.info("Server is running on port %s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"])
