"""
HTML view routes for the fixture table application.

Routes:
    GET/POST /login          - Sign-in form
    GET      /logout         - Clear the session
    GET      /               - Dashboard
    GET      /<view>         - Card layout with the table switch
    GET      /<view>?view=table - Table layout with filters
"""

import logging
from functools import wraps

from flask import Blueprint, abort, current_app, redirect, render_template, request, session, url_for

from app.auth import create_token
from app.catalog import VIEWS, get_view_spec

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


def login_required(view_func):
    """Redirect to the sign-in page when there is no session."""

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        if not session.get("username"):
            return redirect(url_for("views.login", next=request.full_path))
        return view_func(*args, **kwargs)

    return wrapper


@views_bp.route("/login", methods=["GET", "POST"])
def login():
    """Render the sign-in form or sign the user in."""
    if session.get("username"):
        return redirect(url_for("views.index"))

    error = None
    if request.method == "POST":
        username = request.form.get("username", "").strip()
        password = request.form.get("password", "")
        if (
            username == current_app.config["FIXTURE_USERNAME"]
            and password == current_app.config["FIXTURE_PASSWORD"]
        ):
            session["username"] = username
            session["token"] = create_token(username)
            logger.info("User %s signed in", username)
            next_url = request.args.get("next", "")
            # Only follow local redirects
            if not next_url.startswith("/") or next_url.startswith("//"):
                next_url = url_for("views.index")
            return redirect(next_url)
        error = "Invalid username or password"
        logger.info("Failed sign-in for %s", username)

    return render_template("login.html", error=error), (401 if error else 200)


@views_bp.route("/logout")
def logout():
    session.clear()
    return redirect(url_for("views.login"))


@views_bp.route("/")
@login_required
def index():
    return render_template("dashboard.html", views=VIEWS.values())


@views_bp.route("/<view_id>")
@login_required
def table_view(view_id: str):
    """Render a view in card or table layout."""
    spec = get_view_spec(view_id)
    if spec is None:
        abort(404)

    layout = "table" if request.args.get("view") == "table" else "cards"
    client_config = spec.to_client()
    client_config.update(
        token=session["token"],
        renderDelayMs=current_app.config["RENDER_DELAY_MS"],
    )
    return render_template("table.html", spec=spec, layout=layout, client_config=client_config)
