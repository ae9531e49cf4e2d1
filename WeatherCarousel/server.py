"""HTTP endpoint exposing the aggregated weather for all cities."""
import logging
import os
from typing import Optional

from flask import Flask, Response, jsonify

from weather_service import WeatherService

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_ICON_PATH = os.path.join(BASE_DIR, "static", "apple-touch-icon.png")
CACHE_MAX_AGE = 300


def create_app(service: WeatherService, icon_path: Optional[str] = None) -> Flask:
    """
    Build the Flask app serving the weather collection.

    Args:
        service: Aggregating weather service
        icon_path: PNG served by /api/check-icon (defaults to static/apple-touch-icon.png)

    Returns:
        Flask: Configured application
    """
    app = Flask(__name__)
    icon_path = icon_path or DEFAULT_ICON_PATH

    @app.route("/api/weather", methods=["GET"])
    def weather():
        try:
            records = service.get_all()
        except Exception as e:
            logging.error(f"Error in weather API route: {e}", exc_info=True)
            return jsonify({"error": "Failed to fetch weather data"}), 500

        response = jsonify([record.to_dict() for record in records])
        response.headers["Cache-Control"] = f"public, max-age={CACHE_MAX_AGE}"
        return response

    @app.route("/api/check-icon", methods=["GET"])
    def check_icon():
        try:
            with open(icon_path, "rb") as f:
                data = f.read()
        except OSError:
            logging.debug(f"Icon not found at {icon_path}")
            return jsonify({"error": "Icon not found"}), 404

        return Response(
            data,
            mimetype="image/png",
            headers={"Cache-Control": "public, max-age=0, must-revalidate"},
        )

    return app
