from flask import Flask
from werkzeug.exceptions import HTTPException
import os
import sys
from colorama import Fore, Style

from counter_service.counter import CallCounter
from counter_service.identity import load_identity

# -------------------- Environment --------------------
PORT = os.environ.get("PORT", "8080")
COUNTER_ID = os.environ.get("COUNTER_ID")

HEADER_KEY = "Counter-ID"


# -------------------- Helper Functions --------------------
def render_page(identity, title, message):
    return (
        f"<html><head><title>{title}</title></head>"
        f"<body style=\"border-top: 8px solid {identity.color}\"><h1>{message}</h1></body></html>\n"
    )


def flush_output():
    """Push buffered log lines out before the process is terminated"""
    sys.stdout.flush()
    sys.stderr.flush()


# -------------------- App Factory --------------------
def create_app(counter=None, identity=None, terminate=os._exit):
    """
    Build the counting service. The counter and identity live for the whole process;
    terminate receives the exit status for /kill and /exit.
    """
    if counter is None:
        counter = CallCounter()
    if identity is None:
        identity = load_identity(COUNTER_ID)

    app = Flask(__name__)
    app.config["COUNTER"] = counter
    app.config["IDENTITY"] = identity

    @app.after_request
    def add_counter_header(resp):
        resp.headers[HEADER_KEY] = identity.instance_id
        return resp

    @app.errorhandler(Exception)
    def write_failure(e):
        if isinstance(e, HTTPException):
            return e
        print(f"{Fore.RED}ERROR | {e.__class__.__name__}: {e}{Style.RESET_ALL}", file=sys.stderr)
        return "Error when writing response. Error: " + str(e), 500

    @app.route("/count", methods=["GET"])
    def count():
        total = counter.increment()
        return render_page(
            identity,
            "Simple Counting Service",
            f"Call to service {identity.instance_id}; total calls: {total}",
        )

    @app.route("/reset", methods=["GET"])
    def reset():
        counter.reset()
        print(f"[{identity.instance_id}] Counter reset", flush=True)
        return render_page(
            identity,
            "Simple Counting Service",
            f"Call to service {identity.instance_id}; counter reset!",
        )

    @app.route("/kill", methods=["GET"])
    def kill():
        print(f"{Fore.RED}[{identity.instance_id}] Killed, exiting with status 1{Style.RESET_ALL}", file=sys.stderr)
        flush_output()
        terminate(1)
        return "Exiting with status 1\n", 500

    @app.route("/exit", methods=["GET"])
    def exit_properly():
        print(f"{Fore.YELLOW}[{identity.instance_id}] Exiting with status 0{Style.RESET_ALL}")
        flush_output()
        terminate(0)
        return "Exiting with status 0\n"

    @app.route("/", defaults={"subpath": ""}, methods=["GET"])
    @app.route("/<path:subpath>", methods=["GET"])
    def redirect_page(subpath):
        return render_page(
            identity,
            "Simple Service",
            "Please call service on path '/count'. "
            "To explore exit behaviour, use path '/kill' (error) and '/exit' (no error)",
        )

    return app


def main():
    app = create_app()
    identity = app.config["IDENTITY"]
    print(f"[{identity.instance_id}] Launching service on port {PORT}", flush=True)
    app.run(host="0.0.0.0", port=int(PORT))


if __name__ == "__main__":
    main()
