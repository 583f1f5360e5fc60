"""
HTML rendering for the todo list.

Templates are rendered with Flask's autoescaping, so todo content is always
escaped. Fragments are swapped into the page by htmx.
"""

from flask import render_template_string
from .repository import SortFilter

TODO_TEMPLATE = """
<div id="todo-{{ todo.id }}" class="w-full">
    <hr class="w-full"/>
    <div class="flex flex-row justify-between w-full text-xl">
        <p>{{ todo.content }}</p>
        <p>{{ "done" if todo.done else "not done" }}</p>
        <button
            hx-put="{{ url_for('todos.toggle_todo', todo_id=todo.id) }}"
            hx-target="#todo-{{ todo.id }}"
            hx-swap="outerHTML"
        >
            Mark as done
        </button>
        <button
            hx-delete="{{ url_for('todos.delete_todo', todo_id=todo.id) }}"
            hx-target="#todo-{{ todo.id }}"
            hx-swap="delete"
        >
            Delete
        </button>
    </div>
</div>
"""

TODO_LIST_TEMPLATE = (
    "{% for todo in todos %}" + TODO_TEMPLATE + "{% endfor %}"
)

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>TodoMVC</title>
    <script src="https://unpkg.com/htmx.org@1.9.10"></script>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="w-1/2 m-auto">
    <h1 class="text-3xl">TodoMVC</h1>
    <select name="sort" hx-trigger="change" hx-get="{{ url_for('todos.list_todos') }}" hx-target="#todos">
        {% for option in sort_options %}
        <option value="{{ option.value }}"{% if loop.first %} selected{% endif %}>{{ option.value | capitalize }}</option>
        {% endfor %}
    </select>
    <div class="flex flex-col" id="todos">
        {% for todo in todos %}""" + TODO_TEMPLATE + """{% endfor %}
    </div>
    <hr class="w-full"/>
    <form hx-post="{{ url_for('todos.create_todo') }}" hx-target="#todos" hx-swap="beforeend">
        <input type="text" name="content"/>
        <button class="bg-teal-200 rounded-md p-2" type="submit">
            Add new
        </button>
    </form>
</body>
</html>
"""


def render_todo(todo):
    return render_template_string(TODO_TEMPLATE, todo=todo)


def render_todos(todos):
    return render_template_string(TODO_LIST_TEMPLATE, todos=todos)


def render_page(todos):
    return render_template_string(PAGE_TEMPLATE, todos=todos, sort_options=list(SortFilter))
