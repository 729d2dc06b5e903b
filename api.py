"""
Flask REST API for PocketCalc
Drives one calculator engine per client session over JSON
"""
import secrets
import threading
from collections import OrderedDict

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from calculator import CalculatorEngine
from input_handler import InvalidInputError, handle_action, handle_key


class SessionStore:
    """Bounded map of session id -> engine, least recently used dropped first"""

    def __init__(self, max_sessions=config.MAX_SESSIONS):
        self.max_sessions = max_sessions
        self.lock = threading.Lock()
        self._engines = OrderedDict()

    def create(self):
        session_id = secrets.token_hex(8)
        with self.lock:
            self._engines[session_id] = CalculatorEngine()
            while len(self._engines) > self.max_sessions:
                self._engines.popitem(last=False)
            return session_id, self._engines[session_id].snapshot()

    def apply(self, session_id, operation):
        """Run operation(engine) under the store lock; KeyError for unknown ids"""
        with self.lock:
            engine = self._engines[session_id]
            self._engines.move_to_end(session_id)
            result = operation(engine)
            return result, engine.snapshot()

    def delete(self, session_id):
        with self.lock:
            del self._engines[session_id]

    def __len__(self):
        return len(self._engines)

    def __contains__(self, session_id):
        return session_id in self._engines


def _not_found(session_id):
    return jsonify({'success': False, 'error': f'Unknown session: {session_id}'}), 404


def create_app(store=None):
    """Build the Flask app; each app owns its own session store"""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes
    sessions = store if store is not None else SessionStore()
    app.config['SESSIONS'] = sessions

    @app.route('/api')
    def api_info():
        """API information"""
        return jsonify({
            'success': True,
            'data': {
                'name': config.APP_NAME,
                'version': config.VERSION,
                'endpoints': [
                    'POST /api/sessions',
                    'GET /api/sessions/<id>',
                    'POST /api/sessions/<id>/key',
                    'POST /api/sessions/<id>/action',
                    'DELETE /api/sessions/<id>',
                ],
            }
        })

    @app.route('/api/sessions', methods=['POST'])
    def create_session():
        """Start a fresh calculator"""
        try:
            session_id, state = sessions.create()
            return jsonify({
                'success': True,
                'data': {'session_id': session_id, 'state': state}
            }), 201
        except Exception as e:
            app.logger.exception("Failed to create session")
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/sessions/<session_id>')
    def get_session(session_id):
        """Get the current calculator state"""
        try:
            _, state = sessions.apply(session_id, lambda engine: None)
            return jsonify({'success': True, 'data': state})
        except KeyError:
            return _not_found(session_id)
        except Exception as e:
            app.logger.exception("Failed to read session %s", session_id)
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/sessions/<session_id>/key', methods=['POST'])
    def press_key(session_id):
        """Apply a keyboard key, e.g. {"key": "7"} or {"key": "Enter"}"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('key'), str):
            return jsonify({'success': False, 'error': 'No key provided'}), 400

        key = data['key']
        try:
            handled, state = sessions.apply(session_id, lambda engine: handle_key(engine, key))
        except KeyError:
            return _not_found(session_id)
        except Exception as e:
            app.logger.exception("Key %r failed for session %s", key, session_id)
            return jsonify({'success': False, 'error': str(e)}), 500

        if not handled:
            return jsonify({'success': False, 'error': f'Unmapped key: {key}'}), 400
        return jsonify({'success': True, 'data': state})

    @app.route('/api/sessions/<session_id>/action', methods=['POST'])
    def press_button(session_id):
        """Apply a keypad button, e.g. {"action": "digit", "value": "7"}"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('action'), str):
            return jsonify({'success': False, 'error': 'No action provided'}), 400

        action = data['action']
        value = data.get('value')
        try:
            _, state = sessions.apply(session_id, lambda engine: handle_action(engine, action, value))
            return jsonify({'success': True, 'data': state})
        except KeyError:
            return _not_found(session_id)
        except InvalidInputError as e:
            return jsonify({'success': False, 'error': str(e)}), 400
        except Exception as e:
            app.logger.exception("Action %r failed for session %s", action, session_id)
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/sessions/<session_id>', methods=['DELETE'])
    def delete_session(session_id):
        """Drop a calculator session"""
        try:
            sessions.delete(session_id)
            return jsonify({'success': True})
        except KeyError:
            return _not_found(session_id)

    return app


app = create_app()


def serve(host=config.WEB_HOST, port=config.WEB_PORT):
    """Run the module-level app until interrupted"""
    print("\n" + "="*60)
    print(f"{config.APP_NAME} API Server")
    print("="*60)
    print(f"Server starting on http://{host}:{port}/api")
    if host == '0.0.0.0':
        print(f"Listening on all interfaces, port {port}")
    print("="*60 + "\n")

    app.run(host=host, port=port, debug=False)


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description=f"Run the {config.APP_NAME} API server")
    parser.add_argument("--host", default=config.WEB_HOST, help="interface to bind")
    parser.add_argument("--port", type=int, default=config.WEB_PORT, help="port to listen on")
    args = parser.parse_args()
    serve(args.host, args.port)
