import functools
import logging
import os
from flask import Flask, render_template
from sqlalchemy.engine import make_url
import routes
from config import Config
from extensions import db, db_lock
from routes import blueprints
from services.seed import seed_demo_data

logger = logging.getLogger(__name__)

# Pages and assets ship inside the routes package so a regular install carries them.
WEB_DIR = os.path.dirname(os.path.abspath(routes.__file__))


def is_memory_db(uri) -> bool:
    url = make_url(uri)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def serialized(wsgi_app):
    """Run each request, teardown included, while holding db_lock."""

    @functools.wraps(wsgi_app)
    def wrapped(environ, start_response):
        with db_lock:
            return wsgi_app(environ, start_response)

    return wrapped


def create_app(config_object=Config):
    app = Flask(
        __name__,
        template_folder=os.path.join(WEB_DIR, "templates"),
        static_folder=os.path.join(WEB_DIR, "static"),
    )
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db.init_app(app)

    with app.app_context():
        try:
            db.create_all()
            if app.config.get("SEED_DEMO_DATA"):
                seed_demo_data()
        except Exception as e:
            logger.exception("database setup failed: %s", e)
            raise

    for bp in blueprints:
        app.register_blueprint(bp)

    @app.errorhandler(500)
    def server_error(e):
        logger.error("Unhandled error: %s", getattr(e, "original_exception", e))
        return render_template("error.html", message="Internal Server Error"), 500

    if is_memory_db(app.config["SQLALCHEMY_DATABASE_URI"]):
        app.wsgi_app = serialized(app.wsgi_app)

    return app

app = create_app()

if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], threaded=True)
