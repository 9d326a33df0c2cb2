import sys
import threading
import traceback

from flask import Flask, request, jsonify
from flask_cors import CORS

# Fix encoding for Windows console
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8')

from src.data.wordlist import load_dictionary
from src.spelling.config import MAX_DISTANCE_LENGTH, get_language, get_words_path
from src.spelling.edit_distance import distance
from src.spelling.errors import DictionarySourceUnavailable
from src.spelling.spellcheck import SpellChecker


# Lazy loading - only build the dictionary on first request to keep startup fast
dictionary = None
_dictionary_lock = threading.Lock()


def get_dictionary():
    """Lazy load the dictionary on first request"""
    global dictionary
    with _dictionary_lock:
        if dictionary is None:
            language = get_language()
            source = f"pyspellchecker:{language}" if language else get_words_path()
            print(f"📖 Loading dictionary from {source}...")
            dictionary = load_dictionary(language=language)
            print(f"✅ Dictionary loaded ({len(dictionary)} words)")
    return dictionary


app = Flask(__name__)
CORS(app)


@app.route('/health')
def health():
    return jsonify({'status': 'ok', 'dictionary_loaded': dictionary is not None})


@app.route('/spellcheck', methods=['POST'])
def spellcheck():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    text = data.get('text')
    if not isinstance(text, str):
        return jsonify({'error': 'Missing "text" field'}), 400

    try:
        checker = SpellChecker(get_dictionary())
    except DictionarySourceUnavailable as e:
        print(f"❌ Dictionary error: {e}")
        return jsonify({'error': str(e)}), 500

    classified = list(checker.check(text))
    unknown = [item.token for item in classified if not item.known]
    if unknown:
        print(f"🔍 {len(unknown)} unknown of {len(classified)} tokens")

    return jsonify({
        'rendered': checker.render(text),
        'tokens': [{'token': item.token, 'known': item.known} for item in classified],
        'unknown_count': len(unknown),
    })


@app.route('/distance', methods=['POST'])
def edit_distance():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    a, b = data.get('a'), data.get('b')
    if not isinstance(a, str) or not isinstance(b, str):
        return jsonify({'error': 'Fields "a" and "b" must both be strings'}), 400
    if len(a) > MAX_DISTANCE_LENGTH or len(b) > MAX_DISTANCE_LENGTH:
        return jsonify({'error': f'Fields "a" and "b" are limited to {MAX_DISTANCE_LENGTH} characters'}), 400

    try:
        return jsonify({'distance': distance(a, b)})
    except Exception as e:
        print(f"Error: {str(e)}")
        print(traceback.format_exc())
        return jsonify({'error': str(e)}), 500


if __name__ == '__main__':
    # host='0.0.0.0' allows access from other devices on the network
    app.run(host='0.0.0.0', port=5000, debug=True)
