"""
Category Suggestion Review Dashboard

A Flask-based tool for trying category suggestions and reviewing how uploaded
transaction files are categorized. Results can be exported as CSV or JSON.

This tool is read-only and does NOT modify the keyword dictionary.
"""

import csv
import io
import json
import os
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List

from flask import Flask, jsonify, request, send_file
from werkzeug.utils import secure_filename

from category_engine import SUGGESTION_CONFIG, build_suggester
from transaction_batch_processor import SUPPORTED_EXTENSIONS, TransactionBatchProcessor


app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 50 * 1024 * 1024  # 50MB max upload size

# Built once at startup; an extra keyword CSV can be supplied through the environment
suggester = build_suggester(os.environ.get('CATEGORY_EXTRA_KEYWORDS_CSV'))
processor = TransactionBatchProcessor(suggester=suggester)

EXPORT_FIELDS = [
    'date', 'description', 'notes', 'type', 'amount',
    'category', 'suggestions', 'match_method', 'matched_keyword', 'confidence',
]


def allowed_file(filename: str) -> bool:
    """Check if file extension is allowed."""
    return '.' in filename and f".{filename.rsplit('.', 1)[1].lower()}" in SUPPORTED_EXTENSIONS


def upload_name(filename: str) -> str:
    """Sanitize an uploaded file name, keeping its extension."""
    stem, extension = os.path.splitext(filename)
    # secure_filename drops non-ASCII characters, so a stem can vanish entirely
    return (secure_filename(stem) or 'upload') + extension.lower()


def generate_summary(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Generate aggregate summary statistics from categorization results.

    Args:
        results: List of categorized transaction rows

    Returns:
        Dictionary with summary statistics
    """
    summary = {
        'total_transactions': len(results),
        'by_category': defaultdict(int),
        'by_match_method': defaultdict(int),
        'multi_category_count': 0,
        'unmatched_transactions': [],
    }

    for result in results:
        summary['by_category'][result['category']] += 1
        summary['by_match_method'][result['match_method']] += 1

        suggestions = result.get('suggestions') or []
        if len(suggestions) > 1:
            summary['multi_category_count'] += 1
        if not suggestions:
            # Track transactions without suggestions for dictionary review
            summary['unmatched_transactions'].append({
                'description': result.get('description', ''),
                'notes': result.get('notes', ''),
                'amount': result.get('amount', 0),
                'category': result['category'],
            })

    # Convert defaultdicts to regular dicts for JSON serialization
    summary['by_category'] = dict(summary['by_category'])
    summary['by_match_method'] = dict(summary['by_match_method'])

    return summary


@app.route('/')
def index():
    """List the categories and how many keywords each one has."""
    return jsonify({
        'categories': [
            {'name': name, 'keyword_count': len(suggester.keyword_dict[name])}
            for name in suggester.category_names
        ],
        'fallback_category': SUGGESTION_CONFIG['fallback_category'],
    })


@app.route('/suggest', methods=['POST'])
def suggest():
    """
    Suggest categories for a piece of text.

    Expects JSON body {"text": "..."}.
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'text' not in data:
        return jsonify({'error': 'No text provided'}), 400

    text = data['text']
    if not isinstance(text, str):
        return jsonify({'error': 'Text must be a string'}), 400

    matches = suggester.match_categories(text)
    max_suggestions = SUGGESTION_CONFIG['max_suggestions']
    if max_suggestions is not None:
        matches = matches[:max_suggestions]

    return jsonify({
        'text': text,
        'suggestions': [match.category for match in matches],
        'matched_keywords': {match.category: match.keyword for match in matches},
    })


@app.route('/upload', methods=['POST'])
def upload_files():
    """
    Handle multiple file uploads and categorize their transactions.

    Returns JSON with categorization results and summary statistics.
    """
    if 'files' not in request.files:
        return jsonify({'error': 'No files provided'}), 400

    files = request.files.getlist('files')

    if not files or all(f.filename == '' for f in files):
        return jsonify({'error': 'No files selected'}), 400

    batch = []
    errors = []

    for file in files:
        if file and file.filename and allowed_file(file.filename):
            batch.append((upload_name(file.filename), file.read()))
        elif file and file.filename:
            errors.append({
                'filename': file.filename,
                'error': 'Invalid file type. Only JSON and CSV files are allowed.'
            })

    batch_result = processor.process_batch(batch)

    all_results = []
    file_summaries = []
    for file_result in batch_result.results:
        all_results.extend(file_result.transactions)
        file_summaries.append({
            'filename': file_result.file_name,
            'transaction_count': len(file_result.transactions),
            'status': 'success'
        })

    for error in batch_result.errors:
        errors.append({
            'filename': error.file_name,
            'error': error.error_message,
            'error_type': error.error_type,
        })

    if not all_results and errors:
        return jsonify({'error': 'All files failed to process', 'details': errors}), 400

    response = {
        'success': True,
        'files_processed': len(file_summaries),
        'file_summaries': file_summaries,
        'total_transactions': len(all_results),
        'results': all_results,
        'summary': generate_summary(all_results),
        'errors': errors if errors else None,
    }

    return jsonify(response)


def _export_rows(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    rows = []
    for result in results:
        row = dict(result)
        if isinstance(row.get('suggestions'), list):
            row['suggestions'] = '|'.join(row['suggestions'])
        rows.append(row)
    return rows


@app.route('/export/csv', methods=['POST'])
def export_csv():
    """
    Export categorization results to CSV format.

    Expects JSON body with 'results' field containing categorization results.
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'results' not in data:
        app.logger.warning("CSV export: No results provided in request")
        return jsonify({'error': 'No results provided'}), 400

    results = data['results']

    if not isinstance(results, list):
        app.logger.error(f"CSV export: Results is not a list, got {type(results)}")
        return jsonify({'error': 'Results must be an array'}), 400

    try:
        output = io.StringIO()
        writer = csv.DictWriter(
            output,
            fieldnames=EXPORT_FIELDS,
            restval='',  # Use empty string for missing fields
            extrasaction='ignore',
        )

        writer.writeheader()
        for row in _export_rows(results):
            writer.writerow(row)

        csv_data = output.getvalue().encode('utf-8')
    except (TypeError, ValueError, AttributeError) as e:
        app.logger.error(f"CSV export error: {str(e)}", exc_info=True)
        return jsonify({'error': f'Failed to export CSV: {str(e)}'}), 500

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    filename = f'category_suggestions_{timestamp}.csv'

    app.logger.info(f"CSV export: Successfully exported {len(results)} results")

    return send_file(
        io.BytesIO(csv_data),
        mimetype='text/csv',
        as_attachment=True,
        download_name=filename
    )


@app.route('/export/json', methods=['POST'])
def export_json():
    """
    Export categorization results to JSON format.

    Expects JSON body with 'results' field containing categorization results.
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'results' not in data:
        app.logger.warning("JSON export: No results provided in request")
        return jsonify({'error': 'No results provided'}), 400

    results = data['results']

    if not isinstance(results, list):
        app.logger.error(f"JSON export: Results is not a list, got {type(results)}")
        return jsonify({'error': 'Results must be an array'}), 400

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    filename = f'category_suggestions_{timestamp}.json'

    json_data = json.dumps(results, indent=2, ensure_ascii=False).encode('utf-8')

    app.logger.info(f"JSON export: Successfully exported {len(results)} results")

    return send_file(
        io.BytesIO(json_data),
        mimetype='application/json',
        as_attachment=True,
        download_name=filename
    )


if __name__ == '__main__':
    app.run(debug=True, port=5000)
