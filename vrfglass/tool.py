# coding: utf-8

import argparse
import asyncio
import json
import logging
import sys

import vrfglass
import vrfglass.directory
import vrfglass.query
import vrfglass.rd
import vrfglass.search

DEFAULT_CONFIG = {
    "api_url": "http://127.0.0.1:3000",
    "timeout": 10.0,
}


def load_directory(config):
    client = vrfglass.directory.DirectoryClient(config["api_url"],
                                                timeout=config["timeout"])
    return asyncio.run(vrfglass.directory.InstanceDirectory.initialize(client))


def main_routers(args, config, directory):
    for router in directory.routers:
        print("{}\t{}".format(router.id, router.client_name))


def main_routing_instances(args, config, directory):
    for entry in vrfglass.search.deduplicated_routing_instances(directory):
        rd_type = vrfglass.rd.type_name(entry.route_distinguisher) or "-"
        print("{}\t{}\t{}".format(entry.route_distinguisher, rd_type,
                                  entry.label))


def main_query(args, config, directory):
    form = vrfglass.search.SearchForm(directory)
    submit = vrfglass.query.SubmitQuery(mode=args.mode, value=args.value,
                                        router=args.router,
                                        route_distinguisher=args.rd)
    try:
        query = vrfglass.query.build_query(submit, form.offers_instances)
    except vrfglass.query.QueryError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    if args.rd is not None and not form.offers_instances:
        print("Only one routing instance known, ignoring {}".format(args.rd),
              file=sys.stderr)
    print(query.to_string())


def main_parse(args, config, directory):
    try:
        query = vrfglass.query.SearchQuery.parse(args.query)
    except vrfglass.query.QueryError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    print("mode\t{}".format(query.mode))
    print("value\t{}".format(query.value))
    print("value-type\t{}".format(query.value_type or "-"))
    print("router\t{}".format(query.router))
    print("route-distinguisher\t{}".format(
        query.route_distinguisher or vrfglass.query.DEFAULT_INSTANCE))


def main(args=sys.argv[1:]):
    argparser = argparse.ArgumentParser(description="Route lookup query tool")

    argparser.add_argument("--config", "-c", help="Configuration file")
    argparser.add_argument("--api", "-A", help="Base URL of the collector API")
    argparser.add_argument("--version", action="version", version=vrfglass.version)
    argparser.add_argument("--verbose", "-v", action="store_true", default=False)

    subparsers = argparser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("routers", help="List known routers")
    subparsers.add_parser("routing-instances", help="List distinct routing instances")

    parser_query = subparsers.add_parser("query", help="Build lookup query string")
    parser_query.add_argument("--mode", "-m", default=vrfglass.query.DEFAULT_MODE,
                              choices=vrfglass.query.MODES, help="Match mode")
    parser_query.add_argument("--router", "-r", default=vrfglass.query.ALL_ROUTERS,
                              help="Restrict lookup to router name")
    parser_query.add_argument("--rd", help="Restrict lookup to route distinguisher")
    parser_query.add_argument("value", nargs="?", default="",
                              help="IP address, prefix or DNS name")

    parser_parse = subparsers.add_parser("parse", help="Decode lookup query string")
    parser_parse.add_argument("query")

    args = argparser.parse_args(args)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = dict(DEFAULT_CONFIG)
    if args.config is not None:
        with open(args.config) as fh:
            config.update(json.load(fh))
    if args.api is not None:
        config["api_url"] = args.api

    if args.command is None:
        argparser.print_help()
        sys.exit(2)

    directory = None
    if args.command != "parse":
        try:
            directory = load_directory(config)
        except vrfglass.directory.InitializationFailure as e:
            print("Unable to load routers and routing instances: {}".format(e),
                  file=sys.stderr)
            sys.exit(1)

    {
        "routers": main_routers,
        "routing-instances": main_routing_instances,
        "query": main_query,
        "parse": main_parse,
    }[args.command](args, config, directory)


if __name__ == "__main__":
    main()
