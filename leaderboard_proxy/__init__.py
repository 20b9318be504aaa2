from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from config import Config
from leaderboard_proxy.errors import InternalError, ProxyError
import logging


def configure_logging(app):
    # Only the first app configures the root logger; later calls would open
    # handlers that basicConfig ignores
    if not logging.getLogger().handlers:
        handlers = [logging.StreamHandler()]
        if app.config.get('LOG_FILE'):
            handlers.append(logging.FileHandler(app.config['LOG_FILE'], mode='a'))

        logging.basicConfig(
            level=app.config.get('LOG_LEVEL', 'INFO'),
            format='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            handlers=handlers)

    logging.getLogger('leaderboard_proxy').setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)
    logger = logging.getLogger(__name__)
    logger.info("Starting application initialization")

    # Configure CORS for the JSON routes only
    origins = app.config.get('CORS_ORIGINS') or []
    if isinstance(origins, str) and origins != '*':
        origins = [origin.strip() for origin in origins.split(',') if origin.strip()]
    CORS(app,
         resources={
             r"/api/*": {
                 "origins": origins,
                 "methods": ["GET", "POST", "PUT", "OPTIONS"],
                 "allow_headers": ["Content-Type", "Authorization", "Accept"],
                 "expose_headers": ["Content-Type", "Authorization"]
             }
         })

    @app.errorhandler(ProxyError)
    def proxy_error(error):
        return error.to_response()

    @app.errorhandler(HTTPException)
    def http_error(error):
        # JSON routes never answer with an HTML error page
        if request.path.startswith('/api/'):
            return jsonify({"error": error.description}), error.code
        return error

    @app.errorhandler(Exception)
    def unexpected_error(error):
        if isinstance(error, HTTPException):
            return http_error(error)
        logger.error(f"Unhandled error on {request.method} {request.path}: {str(error)}",
                     exc_info=True)
        return InternalError("Internal server error").to_response()

    from leaderboard_proxy.routes import auth, leaderboard, update, main, page
    app.register_blueprint(page.bp)
    app.register_blueprint(main.bp, url_prefix='/api')
    app.register_blueprint(auth.bp, url_prefix='/api')
    app.register_blueprint(leaderboard.bp, url_prefix='/api')
    app.register_blueprint(update.bp, url_prefix='/api')
    logger.info("Successfully registered all blueprints")

    logger.info(
        f"Proxying to {app.config['UPSTREAM_BASE_URL']} "
        f"(timeout {app.config['UPSTREAM_TIMEOUT_MS']} ms)")
    return app
