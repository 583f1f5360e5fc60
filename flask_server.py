"""
Flask server for the htmx todo list:
"""

from todomvc import create_app

app = create_app()

if __name__ == '__main__':
    # Run Flask app on port 3000
    print(f"[Flask] Starting todo server on {app.config['HOST']}:{app.config['PORT']}...")
    app.run(host=app.config["HOST"], port=app.config["PORT"])
