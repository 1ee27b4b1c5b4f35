from flask import Flask, render_template, request, jsonify, session
import logging
import os

from config import Config
from errors import FlashcardError
from services.gemini_service import GeminiTextGenerator
from services.render_service import CardPayloadRenderer
from services.storage_service import SessionStore

logger = logging.getLogger(__name__)

SESSION_KEY = 'flashcard_session'

def create_app(generate=None, secret_key=None):
    """Create the Flask app; ``generate`` replaces the Gemini call when given"""
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    app = Flask(__name__)
    app.secret_key = secret_key or os.getenv('SECRET_KEY') or os.urandom(24)
    app.extensions['flashcard_store'] = SessionStore(generate or GeminiTextGenerator())

    register_routes(app)
    return app

def get_store(app) -> SessionStore:
    return app.extensions['flashcard_store']

def current_session(app):
    """Return the FlashcardSession bound to the caller's browser session"""
    key = session.get(SESSION_KEY)
    if not key:
        key = SessionStore.new_key()
        session[SESSION_KEY] = key
    return get_store(app).get(key)

def register_routes(app):
    @app.errorhandler(FlashcardError)
    def handle_flashcard_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.route('/')
    def home():
        # A page load starts over, like a fresh browser tab
        store = get_store(app)
        key = session.pop(SESSION_KEY, None)
        if key:
            store.discard(key)
        store.cleanup_old_sessions()
        return render_template('index.html', add_more_count=Config.ADD_MORE_COUNT)

    @app.route('/generate', methods=['POST'])
    def generate():
        """Generate a new set of flashcards from a topic"""
        data = request.get_json(silent=True) or {}
        flashcard_session = current_session(app)
        renderer = CardPayloadRenderer()
        try:
            flashcard_session.start(data.get('topic'), renderer=renderer)
        except FlashcardError:
            raise
        except Exception as e:
            logger.exception("Error in generate")
            return jsonify({'error': str(e)}), 500

        return jsonify(renderer.drain())

    @app.route('/add-more', methods=['POST'])
    def add_more():
        """Append more flashcards with terms not already in the set"""
        data = request.get_json(silent=True) or {}
        flashcard_session = current_session(app)
        renderer = CardPayloadRenderer()
        try:
            flashcard_session.extend(data.get('topic'), renderer=renderer)
        except FlashcardError:
            raise
        except Exception as e:
            logger.exception("Error in add_more")
            return jsonify({'error': str(e)}), 500

        return jsonify(renderer.drain())

    @app.route('/flashcards', methods=['GET'])
    def flashcards():
        """Get the current set and status of the caller's session"""
        flashcard_session = current_session(app)
        return jsonify({
            'topic': flashcard_session.topic,
            'flashcards': flashcard_session.flashcards.to_list(),
            'count': len(flashcard_session.flashcards),
            'in_progress': flashcard_session.in_progress,
            'status': flashcard_session.status.to_dict()
        })

app = create_app()

if __name__ == '__main__':
    app.run(debug=False)
