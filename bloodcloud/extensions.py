"""Flask extension instances, bound to the app in create_app."""

from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_login import LoginManager

login_manager = LoginManager()
bcrypt = Bcrypt()
cors = CORS()
