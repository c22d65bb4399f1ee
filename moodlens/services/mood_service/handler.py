"""Mood Service HTTP handler.

Thin transport shell around the classification pipeline and trend
analyzer. All rules live in the pipeline; this module only parses
requests, attaches display and safety metadata, and shapes responses.
Raw journal text is never logged.
"""
import logging
import os

from flask import Flask, jsonify, request

from moodlens.shared.utils import fingerprint_text
from .config import MoodServiceConfig
from .helplines import build_safety_alert, get_helpline_info
from .pipeline import MoodClassificationPipeline
from .theming import NO_HISTORY_RECOMMENDATION, get_mood_recommendation, get_mood_theme
from .trend_analyzer import TrendAnalyzer

logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)

config = MoodServiceConfig.from_env()
pipeline = MoodClassificationPipeline()
trend_analyzer = TrendAnalyzer(thresholds=pipeline.thresholds)

FALLBACK_CONFIDENCE = 0.5


@app.route("/health", methods=["GET"])
def health():
    """Health check endpoint.

    Returns:
        200 with service status
    """
    return jsonify({
        "status": "healthy",
        "service": "mood-service",
        "pattern_version": config.pattern_version,
    }), 200


@app.route("/ready", methods=["GET"])
def ready():
    """Readiness check - verifies the pipeline is initialized.

    Returns:
        200 if ready, 503 if not
    """
    if pipeline is None:
        return jsonify({"status": "not_ready", "reason": "pipeline_not_initialized"}), 503
    return jsonify({"status": "ready"}), 200


@app.route("/classify", methods=["POST"])
def classify_entry():
    """Classify a journal entry.

    Request Body:
        {
            "text": "Journal entry text",
            "manual_mood": "happy" (optional, passed through),
            "country_code": "UK" (optional, for the helpline)
        }

    Response:
        ClassificationResult fields plus "theme" and "safetyAlert"
        (null unless self-harm content was detected)

    Error Handling:
        If classification raises, returns the manual mood (or neutral)
        at 0.5 confidence so the caller can still save the entry.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        logger.warning("CLASSIFY_REQUEST_INVALID", extra={"reason": "empty_body"})
        return jsonify({"error": "JSON object body required"}), 400

    text = data.get("text")
    manual_mood = data.get("manual_mood")
    country_code = data.get("country_code") or config.default_country

    try:
        result = pipeline.classify(text, manual_mood)
    except Exception as e:
        logger.error(
            "CLASSIFY_ERROR",
            extra={
                "error": str(e),
                "error_type": type(e).__name__,
                "text_hash": fingerprint_text(text),
                "action": "DEFAULTING_TO_MANUAL_MOOD",
            },
        )
        fallback_mood = manual_mood or "neutral"
        return jsonify({
            "detectedMood": fallback_mood,
            "confidence": FALLBACK_CONFIDENCE,
            "manualMood": fallback_mood,
            "selfHarmDetected": False,
            "error": "Classifier error - defaulting to manual mood",
        }), 200

    body = result.to_dict()
    body["theme"] = get_mood_theme(result.detected_mood).to_dict()
    body["safetyAlert"] = build_safety_alert(result, country_code)

    if result.self_harm_detected:
        logger.critical(
            "CLASSIFY_SAFETY_ALERT_ISSUED",
            extra={
                "text_hash": fingerprint_text(text),
                "country_code": country_code,
            },
        )

    return jsonify(body), 200


@app.route("/trends", methods=["POST"])
def trends():
    """Summarize a history window supplied by the caller.

    Request Body:
        {"history": [{"mood": "happy", "createdAt": "2026-01-01T09:00:00Z"}, ...]}

    Response:
        Trend summary plus per-mood stats, time patterns and a
        recommendation for the dominant mood
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        logger.warning("TRENDS_REQUEST_INVALID", extra={"reason": "empty_body"})
        return jsonify({"error": "JSON object body required"}), 400

    history = data.get("history") or []
    if not isinstance(history, list):
        logger.warning("TRENDS_REQUEST_INVALID", extra={"reason": "history_not_list"})
        return jsonify({"error": "history must be a list"}), 400

    summary = trend_analyzer.analyze(history)
    body = summary.to_dict()
    body["stats"] = [stat.to_dict() for stat in trend_analyzer.mood_stats(history)]
    body["patterns"] = trend_analyzer.patterns(history).to_dict()
    body["recommendation"] = (
        get_mood_recommendation(summary.dominant_mood)
        if summary.total_entries else NO_HISTORY_RECOMMENDATION
    )
    return jsonify(body), 200


@app.route("/helplines", methods=["GET"])
@app.route("/helplines/<country_code>", methods=["GET"])
def helplines(country_code=None):
    """Static helpline lookup; unknown codes fall back to US."""
    record = get_helpline_info(country_code or config.default_country)
    return jsonify({"countryCode": record.country_code, **record.to_dict()}), 200


if __name__ == "__main__":
    # Configure logging
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Run development server
    port = int(os.getenv("PORT", "8002"))
    app.run(host="0.0.0.0", port=port, debug=False)
