import json
from argparse import ArgumentParser

from flask import Flask, request, make_response, Response

from avltree import Outcome
from db import Db


def asstring(items):
    for item in items:
        yield "{}, {}, \"{}\"\n".format(item[0], item[1], item[2])


def create_app(db=None):
    app = Flask(__name__)
    db = db if db is not None else Db()
    app.config["DB"] = db

    @app.route("/set/<partition_key>/<sort_key>", methods=["POST"])
    def set_value(partition_key, sort_key):
        value = request.data.decode('utf-8')
        outcome = db.store(partition_key, sort_key, value)
        app.logger.info("Saving %s to %s:%s (%s)", value, partition_key, sort_key, outcome.value)
        if outcome is Outcome.INSERTED:
            return make_response('', 201)
        return make_response('', 200)

    @app.route("/get/<partition_key>/<sort_key>", methods=["POST"])
    def get(partition_key, sort_key):
        try:
            return make_response(str(db.get(partition_key, sort_key)))
        except KeyError:
            return make_response('', 404)

    @app.route("/clear/<partition_key>/<sort_key>", methods=["POST"])
    def clear(partition_key, sort_key):
        if db.remove(partition_key, sort_key) is Outcome.NOT_FOUND:
            return make_response('', 404)
        return make_response('', 202)

    @app.route("/query_begins/<partition_key>/<query>/<sort_mode>", methods=["GET"])
    def query_begins(partition_key, query, sort_mode):
        return Response(asstring(db.query_begins(partition_key, query, sort_mode)), mimetype="text/plain")

    @app.route("/query_between/<partition_key>/<from_query>/<to_query>/<sort_mode>", methods=["GET"])
    def query_between(partition_key, from_query, to_query, sort_mode):
        return Response(asstring(db.query_between(partition_key, from_query, to_query, sort_mode)), mimetype="text/plain")

    @app.route("/query_before/<partition_key>/<target>/<sort_mode>", methods=["GET"])
    def query_before(partition_key, target, sort_mode):
        return Response(asstring(db.query_before_than(partition_key, target, sort_mode)), mimetype="text/plain")

    @app.route("/query_after/<partition_key>/<target>/<sort_mode>", methods=["GET"])
    def query_after(partition_key, target, sort_mode):
        return Response(asstring(db.query_greater_than(partition_key, target, sort_mode)), mimetype="text/plain")

    @app.route("/partitions", methods=["GET"])
    def partitions():
        return Response(json.dumps(db.partitions()), mimetype="application/json")

    @app.route("/stats", methods=["GET"])
    def stats():
        return Response(json.dumps(db.stats()), mimetype="application/json")

    return app


def main(argv=None):
    parser = ArgumentParser()
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=1005)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    app = create_app()
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
