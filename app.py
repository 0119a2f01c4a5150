from flask import Flask, jsonify, request, render_template
from config import Config
import logging

from catalog.store import load_catalog
from catalog.queries import get_by_position, get_by_id, search_by_title, has_quality_score

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    MOVIE_VIEWS
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_object(Config)

# Loaded once before the first request and never modified afterwards
catalog = load_catalog(Config.MOVIES_DATA_PATH)
CATALOG_SIZE.set(len(catalog))


@app.template_test('has_metascore')
def has_metascore(metascore):
    return has_quality_score(metascore)


def render_error(title, message, status_code):
    return render_template('error.html', title=title, message=message), status_code


@app.route('/')
@track_request
def home():
    return render_template('index.html', title='Home Page')


@app.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': Config.APP_NAME,
        'version': Config.APP_VERSION,
        'movies_loaded': len(catalog)
    }), 200


@app.route('/data')
@track_request
def data_summary():
    return render_template('data.html', title='All Movies', movies=catalog)


@app.route('/data/movie/<index>')
@track_request
def movie_by_position(index):
    movie = get_by_position(catalog, index)

    if movie is None:
        return render_error('Error', 'Movie not found', 404)

    MOVIE_VIEWS.labels(source='position').inc()

    return render_template('movie.html', title=movie.get('Title'), movie=movie)


@app.route('/search/id')
@track_request
def search_id_form():
    return render_template('search_by_id.html', title='Search by Movie ID')


@app.route('/search/id/result')
@track_request
def search_id_result():
    movie_id = request.args.get('movie_id')

    if movie_id:
        SEARCH_QUERY_COUNT.labels(kind='id').inc()

    movie = get_by_id(catalog, movie_id)

    if movie is None:
        logger.info(f"No movie found for id='{movie_id}'")
        return render_error('Error', f'No movie found with ID "{movie_id or ""}"', 404)

    MOVIE_VIEWS.labels(source='id').inc()

    return render_template('result_by_id.html', title='Search Result', movie=movie)


@app.route('/search/title')
@track_request
def search_title_form():
    return render_template('search_by_title.html', title='Search Movie by Title')


@app.route('/search/title/result')
@track_request
def search_title_result():
    search_title = request.args.get('movie_title')

    matches = search_by_title(catalog, search_title)

    if matches is None:
        return render_error('Error', 'Movie title is required.', 400)

    SEARCH_QUERY_COUNT.labels(kind='title').inc()
    SEARCH_RESULTS_COUNT.observe(len(matches))

    if not matches:
        logger.info(f"Title search returned no results for query='{search_title}'")
        return render_error(
            'No Results',
            f'No movies found with title including "{search_title}".',
            404
        )

    return render_template(
        'result_by_title.html',
        title='Search Results',
        results=matches,
        search_title=search_title
    )


@app.route('/allData')
@track_request
def all_data():
    return render_template('all_data.html', title='All Movies Data', movies=catalog)


@app.route('/allDataFiltered')
@track_request
def all_data_filtered():
    return render_template(
        'all_data_filtered.html',
        title='All Movies (Filtered by Metascore)',
        movies=catalog
    )


@app.route('/allDataHighlight')
@track_request
def all_data_highlight():
    return render_template(
        'all_data_highlight.html',
        title='All Movies with Highlighted Metascore',
        movies=catalog
    )


@app.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


@app.errorhandler(404)
def wrong_route(e):
    return render_error('404', 'Wrong Route', 404)


@app.errorhandler(500)
def internal_error(e):
    logger.error(f"Unhandled error: {e}", exc_info=True)
    return render_error('Error', 'Something went wrong', 500)


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
