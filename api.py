"""
Flask REST API for PocketCalc
Exposes the expression editor and evaluator as JSON endpoints.
The client owns the expression text and sends it with every request.
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
import config
import display
import keypad
from calculator import EditKind, EditToken, apply_edit, evaluate_text

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes


class BadRequest(ValueError):
    """Request body is missing or has the wrong shape."""


def _read_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Expected a JSON object body")
    if 'text' not in data:
        raise BadRequest("'text' is required")
    text = data['text']
    if not isinstance(text, str):
        raise BadRequest("'text' must be a string")
    return data, text


def _read_edit(data):
    """Accept either a button label ('key') or an explicit edit object"""
    if 'key' in data:
        key = data['key']
        if not isinstance(key, str):
            raise BadRequest("'key' must be a string")
        return keypad.parse_key(key)

    edit = data.get('edit')
    if not isinstance(edit, dict):
        raise BadRequest("Provide either 'key' or 'edit'")
    try:
        kind = EditKind(edit.get('kind'))
    except ValueError:
        raise BadRequest(f"Unknown edit kind: {edit.get('kind')!r}")
    value = edit.get('value', '')
    if not isinstance(value, str):
        raise BadRequest("'edit.value' must be a string")
    return EditToken(kind, value)


def _outcome_json(result):
    return {
        'value': result.value,
        'error': result.error.value if result.error else None,
        'message': result.message,
        'display': display.format_outcome(result),
    }


@app.route('/api')
def api_info():
    """API information"""
    return jsonify({
        'success': True,
        'data': {
            'name': config.APP_NAME,
            'version': config.VERSION,
            'endpoints': {
                '/api/health': 'Service status',
                '/api/edit': "POST {text, key} or {text, edit: {kind, value}} - apply one edit",
                '/api/evaluate': 'POST {text} - evaluate an expression',
                '/api/press': 'POST {text, key} - apply a key, evaluating on "="',
            },
        }
    })


@app.route('/api/health')
def health():
    return jsonify({'success': True, 'data': {'status': 'ok', 'version': config.VERSION}})


@app.route('/api/edit', methods=['POST'])
def edit_expression():
    """Apply one edit to the expression text"""
    try:
        data, text = _read_body()
        edit = _read_edit(data)
        new_text = apply_edit(text, edit) if edit is not None else text
        return jsonify({'success': True, 'data': {'text': new_text}})
    except BadRequest as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/evaluate', methods=['POST'])
def evaluate_expression():
    """Evaluate the expression text"""
    try:
        _, text = _read_body()
        return jsonify({'success': True, 'data': _outcome_json(evaluate_text(text))})
    except BadRequest as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/press', methods=['POST'])
def press_key():
    """Apply a key press; '=' evaluates, 'AC' clears the result too"""
    try:
        data, text = _read_body()
        edit = _read_edit(data)
        result = None
        if edit is not None and edit.kind == EditKind.EVALUATE:
            result = _outcome_json(evaluate_text(text))
        elif edit is not None:
            text = apply_edit(text, edit)
        return jsonify({'success': True, 'data': {'text': text, 'result': result}})
    except BadRequest as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


def run_server():
    print("\n" + "="*60)
    print("PocketCalc API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)


if __name__ == '__main__':
    run_server()
