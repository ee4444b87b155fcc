import logging

from flask import Blueprint, Response, current_app, jsonify, request

from api.services.converter_service import (
    LEGACY_CODEPAGE,
    convert,
    describe_encodings,
    encode_legacy,
    stats,
)
from api.services.font_tables import UnknownEncodingError, resolve_encoding

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)


def parse_conversion_request():
    """
    Read text and encoding from a JSON request body

    Returns:
        tuple: (text, encoding, None) on success, or (None, None, error_response)
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, None, (jsonify({'error': 'Request body must be a JSON object'}), 400)

    text = data.get('text')
    if not isinstance(text, str):
        return None, None, (jsonify({'error': 'Field "text" must be a string'}), 400)

    try:
        encoding = resolve_encoding(data.get('encoding') or current_app.config['DEFAULT_ENCODING'])
    except UnknownEncodingError as e:
        return None, None, (jsonify({'error': str(e)}), 400)

    return text, encoding, None


@api_bp.route('/convert', methods=['POST'])
def convert_text():
    """Convert Unicode Malayalam text to a legacy font encoding"""
    text, encoding, error = parse_conversion_request()
    if error:
        return error

    try:
        output = convert(text, encoding, reorder_ra_subjoin=current_app.config['REORDER_RA_SUBJOIN'])
    except Exception as e:
        logger.error(f"Conversion to {encoding} failed: {e}")
        return jsonify({'status': 'error', 'message': f'Conversion failed: {str(e)}'}), 500

    return jsonify({
        'status': 'success',
        'encoding': encoding,
        'output': output
    })


@api_bp.route('/stats', methods=['POST'])
def conversion_stats():
    """Convert text and report input/output sizes"""
    text, encoding, error = parse_conversion_request()
    if error:
        return error

    try:
        result = stats(text, encoding, reorder_ra_subjoin=current_app.config['REORDER_RA_SUBJOIN'])
    except Exception as e:
        logger.error(f"Stats for {encoding} failed: {e}")
        return jsonify({'status': 'error', 'message': f'Conversion failed: {str(e)}'}), 500

    return jsonify({
        'status': 'success',
        'encoding': encoding,
        'stats': result
    })


@api_bp.route('/download', methods=['POST'])
def download_converted():
    """Download the converted text as an 8-bit legacy text file"""
    text, encoding, error = parse_conversion_request()
    if error:
        return error

    try:
        data = encode_legacy(text, encoding, reorder_ra_subjoin=current_app.config['REORDER_RA_SUBJOIN'])
    except Exception as e:
        logger.error(f"Legacy export to {encoding} failed: {e}")
        return jsonify({'status': 'error', 'message': f'Conversion failed: {str(e)}'}), 500

    return Response(
        data,
        content_type=f'text/plain; charset={LEGACY_CODEPAGE}',
        headers={
            'Content-Disposition': f'attachment; filename=converted_{encoding}.txt'
        }
    )


@api_bp.route('/encodings', methods=['GET'])
def list_encodings():
    """List supported legacy encodings"""
    return jsonify({
        'status': 'success',
        'default': current_app.config['DEFAULT_ENCODING'],
        'encodings': describe_encodings()
    })
