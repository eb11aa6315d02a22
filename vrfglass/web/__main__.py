# coding: utf-8

import argparse
import asyncio
import json
import logging
import sys
import wsgiref.simple_server

import vrfglass.directory
import vrfglass.web.application


def main():
    argparser = argparse.ArgumentParser(description="Simple HTTP server for vrfglass web interface")

    argparser.add_argument("--host", "-H", help="Bind to host", default="127.0.0.1")
    argparser.add_argument("--port", "-P", help="Bind to port", default="8080", type=int)
    argparser.add_argument("--config", "-c", help="Path to configuration file")
    argparser.add_argument("--api", "-A", help="Base URL of the collector API")
    argparser.add_argument("--verbose", "-v", action="store_true", default=False)

    args = argparser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = None
    if args.config is not None:
        with open(args.config) as fh:
            config = json.load(fh)
    if args.api is not None:
        config = dict(config or {}, api_url=args.api)

    app = vrfglass.web.application.MainApp(None, config)
    client = vrfglass.directory.DirectoryClient(app.settings["api_url"],
                                                timeout=app.settings["timeout"])
    try:
        app.directory = asyncio.run(
            vrfglass.directory.InstanceDirectory.initialize(client))
    except vrfglass.directory.InitializationFailure as e:
        print("Unable to load routers and routing instances: {}".format(e),
              file=sys.stderr)
        sys.exit(1)

    httpd = wsgiref.simple_server.make_server(args.host, args.port, app)
    print("Serving HTTP on {host}:{port}...".format(host=args.host, port=args.port))

    httpd.serve_forever()

if __name__ == '__main__':
    main()
