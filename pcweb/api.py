import logging

from flask import Flask, jsonify, request

from passcraft.generator import PasswordConfig, InvalidConfigError, generate
from passcraft.evaluator import estimate
from passcraft.templates import TEMPLATES, UnknownTemplateError, get_template
from passcraft.config import MAX_COPIES

logger = logging.getLogger(__name__)

MAX_COUNT = MAX_COPIES


class RequestError(ValueError):
    pass


def _template_json(tpl):
    cfg = tpl.config
    return {
        "key": tpl.key,
        "name": tpl.name,
        "description": tpl.description,
        "length": cfg.length,
        "uppercase": cfg.use_uppercase,
        "lowercase": cfg.use_lowercase,
        "digits": cfg.use_digits,
        "symbols": cfg.use_symbols,
    }


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RequestError("request body must be a JSON object")
    return data


def _flag(data, name):
    value = data.get(name, True)
    if not isinstance(value, bool):
        raise RequestError(f"{name} must be true or false")
    return value


def _config_from_request(data):
    # a template replaces the whole config, it is never merged with the body
    if data.get("template"):
        return get_template(str(data["template"])).config
    return PasswordConfig(
        length=data.get("length", 16),
        use_uppercase=_flag(data, "uppercase"),
        use_lowercase=_flag(data, "lowercase"),
        use_digits=_flag(data, "digits"),
        use_symbols=_flag(data, "symbols"),
    )


def create_app():
    app = Flask(__name__)

    @app.errorhandler(InvalidConfigError)
    def invalid_config(e):
        return jsonify({"error": str(e), "code": e.code}), 400

    @app.errorhandler(UnknownTemplateError)
    def unknown_template(e):
        return jsonify({"error": str(e), "code": "unknown_template"}), 404

    @app.errorhandler(RequestError)
    def bad_request(e):
        return jsonify({"error": str(e), "code": "bad_request"}), 400

    @app.route('/')
    def home():
        return jsonify({"message": "passcraft API is running"})

    @app.route('/templates', methods=['GET'])
    def templates_route():
        return jsonify({"templates": [_template_json(t) for t in TEMPLATES.values()]})

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = _json_body()
        count = data.get('count', 1)
        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= MAX_COUNT:
            raise RequestError(f"count must be an integer between 1 and {MAX_COUNT}")
        config = _config_from_request(data)
        passwords = [generate(config) for _ in range(count)]
        logger.info("generated %d password(s) of length %d", count, config.length)
        return jsonify({'password': passwords[0], 'passwords': passwords})

    @app.route('/score', methods=['POST'])
    def score_route():
        data = _json_body()
        password = data.get('password', '')
        if not isinstance(password, str):
            raise RequestError("password must be a string")
        result = estimate(password)
        return jsonify({'score': result.score, 'label': result.label, 'points': result.points})

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
