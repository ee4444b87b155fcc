import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from api.routes import api_bp
from api.services.font_tables import SUPPORTED_ENCODINGS, preload_font_tables
from config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False

    logging.basicConfig(level=app.config['LOG_LEVEL'])

    # Load the substitution tables before the first request; a broken table
    # file stops startup here
    tables = preload_font_tables()
    logger.info(f"Font tables ready: {', '.join(table.name for table in tables)}")

    # Register blueprints
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        """Report HTTP errors as JSON like the API routes do"""
        return jsonify({'error': e.description}), e.code

    @app.route('/')
    def index():
        return {
            'status': 'online',
            'message': 'Malayalam legacy font conversion API is running',
            'encodings': list(SUPPORTED_ENCODINGS)
        }

    @app.route('/api/health')
    def health_check():
        """Health check endpoint"""
        return {
            'status': 'healthy',
            'encodings': list(SUPPORTED_ENCODINGS),
            'reorder_ra_subjoin': app.config['REORDER_RA_SUBJOIN']
        }

    return app


def run_app():
    """Run the conversion API with the development server"""
    app = create_app()

    print("Starting Flask server for Malayalam legacy font conversion...")
    print(f"Encodings: {', '.join(SUPPORTED_ENCODINGS)}; POST text to /api/convert")

    app.run(
        debug=app.config['DEBUG'],
        host=app.config['HOST'],
        port=app.config['PORT']
    )


if __name__ == '__main__':
    run_app()
