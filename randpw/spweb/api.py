from flask import Flask, jsonify, request
from randpw.errors import PasswordError
from randpw.generator import DIGITS, LOWERCASE, UPPERCASE, CharacterSet, Generator

app = Flask(__name__)

_full = Generator()
_no_symbols = Generator(CharacterSet(lowercase=LOWERCASE, uppercase=UPPERCASE, digits=DIGITS))


class InvalidField(ValueError):
    pass


def _json_object():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidField("request body must be a JSON object")
    return data


def _int_field(data, name, default):
    value = data.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidField(f"'{name}' must be an integer")
    return value


def _bool_field(data, name, default):
    value = data.get(name, default)
    if not isinstance(value, bool):
        raise InvalidField(f"'{name}' must be a boolean")
    return value


@app.errorhandler(PasswordError)
def password_error(e):
    return jsonify({'error': str(e)}), 400


@app.errorhandler(InvalidField)
def bad_field(e):
    return jsonify({'error': str(e)}), 400


@app.route('/')
def home():
    return jsonify({
        "message": "randpw API is running"
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = _json_object()
    length = _int_field(data, 'length', 25)
    g = _full if _bool_field(data, 'symbols', True) else _no_symbols
    return jsonify({'password': g.generate_length(length)})

@app.route('/compose', methods=['POST'])
def compose_route():
    data = _json_object()
    password = _full.generate(
        _int_field(data, 'lower', 0),
        _int_field(data, 'upper', 0),
        _int_field(data, 'digits', 0),
        _int_field(data, 'symbols', 0),
    )
    return jsonify({'password': password})

if __name__ == "__main__":
    app.run(debug=True)
