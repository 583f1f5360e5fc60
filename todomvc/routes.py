from flask import Blueprint, request, session
from .repository import SortFilter, load
from .views import render_page, render_todo, render_todos

todos_bp = Blueprint("todos", __name__)


@todos_bp.route("/", methods=["GET"])
def index():
    state = load(session)
    return render_page(state.items())


@todos_bp.route("/todos", methods=["GET"])
def list_todos():
    # htmx sends the select value in the query string for GET requests
    sort = SortFilter.parse(request.values.get("sort", SortFilter.ALL.value))
    state = load(session)
    return render_todos(state.filtered(sort))


@todos_bp.route("/todos", methods=["POST"])
def create_todo():
    content = request.form.get("content", "")
    state = load(session)
    todo = state.create(content)
    state.save(session)
    return render_todo(todo)


@todos_bp.route("/todos/<int:todo_id>", methods=["PUT"])
def toggle_todo(todo_id):
    state = load(session)
    todo = state.toggle(todo_id)
    state.save(session)
    return render_todo(todo)


@todos_bp.route("/todos/<int:todo_id>", methods=["DELETE"])
def delete_todo(todo_id):
    state = load(session)
    state.delete(todo_id)
    state.save(session)
    return "", 200
