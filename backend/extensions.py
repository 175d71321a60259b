import threading

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# An in-memory SQLite database is one connection shared by every thread,
# so requests against it run one at a time.
db_lock = threading.Lock()
