# coding: utf-8

import asyncio
import collections
import logging

import httpx

logger = logging.getLogger(__name__)

ROUTERS_PATH = "/api/routers"
ROUTING_INSTANCES_PATH = "/api/routing-instances"


class InitializationFailure(Exception):
    pass


class Router(object):
    def __init__(self, id, client_name, attributes=None):
        self.id = id
        self.client_name = client_name
        self.attributes = dict(attributes or {})

    def __getitem__(self, key):
        return self.attributes[key]

    def get(self, key, default=None):
        return self.attributes.get(key, default)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Router):
            return NotImplemented
        return self.id == other.id

    def __repr__(self):
        return "Router({!r}, {!r})".format(self.id, self.client_name)


class RoutingInstanceEntry(collections.namedtuple("RoutingInstanceEntry",
                                                  ["route_distinguisher",
                                                   "display_name"])):
    __slots__ = ()

    @property
    def label(self):
        if self.display_name is None:
            return self.route_distinguisher
        return self.display_name


def parse_routers(payload):
    """ Turns the /api/routers payload (router id -> router object) into a
    list of Router, ordered by client_name. Routers sharing a client_name
    keep their payload order. """
    if not isinstance(payload, dict):
        raise InitializationFailure(
            "Expected router list to be an object, got {}".format(
                type(payload).__name__))
    routers = []
    for router_id, data in payload.items():
        if not isinstance(data, dict) or \
                not isinstance(data.get("client_name"), str):
            raise InitializationFailure(
                "Router {!r} has no client_name".format(router_id))
        attributes = {k: v for k, v in data.items() if k != "client_name"}
        routers.append(Router(router_id, data["client_name"], attributes))
    routers.sort(key=lambda router: router.client_name)
    return routers


def parse_routing_instances(payload):
    if not isinstance(payload, dict):
        raise InitializationFailure(
            "Expected routing instances to be an object, got {}".format(
                type(payload).__name__))
    directory = {}
    for group, entries in payload.items():
        if not isinstance(entries, list):
            raise InitializationFailure(
                "Routing instances of {!r} are not a list".format(group))
        directory[group] = []
        for entry in entries:
            if not isinstance(entry, list) or len(entry) != 2:
                raise InitializationFailure(
                    "Malformed routing instance {!r} in {!r}".format(
                        entry, group))
            rd, name = entry
            if not isinstance(rd, str) or \
                    not (name is None or isinstance(name, str)):
                raise InitializationFailure(
                    "Malformed routing instance {!r} in {!r}".format(
                        entry, group))
            directory[group].append(RoutingInstanceEntry(rd, name))
    return directory


class DirectoryClient(object):
    def __init__(self, base_url, timeout=10.0, transport=None):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def session(self):
        try:
            return httpx.AsyncClient(base_url=self.base_url,
                                     timeout=self.timeout,
                                     transport=self.transport)
        except httpx.InvalidURL as e:
            raise InitializationFailure(
                "Invalid API URL {!r}: {}".format(self.base_url, e)) from e

    async def get_json(self, http, path):
        logger.debug("GET %s%s", self.base_url, path)
        try:
            response = await http.get(path)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise InitializationFailure(
                "GET {} failed: {}".format(path, e)) from e
        except ValueError as e:
            raise InitializationFailure(
                "GET {} returned malformed JSON: {}".format(path, e)) from e

    async def fetch_routers(self, http):
        return parse_routers(await self.get_json(http, ROUTERS_PATH))

    async def fetch_routing_instances(self, http):
        return parse_routing_instances(
            await self.get_json(http, ROUTING_INSTANCES_PATH))

    async def fetch_directory(self):
        """ Retrieves router list and routing instances concurrently. Both
        have to succeed, otherwise the first failure is raised. """
        async with self.session() as http:
            results = await asyncio.gather(
                self.fetch_routers(http),
                self.fetch_routing_instances(http),
                return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return tuple(results)


class InstanceDirectory(object):
    """ Routers and routing instances known to the collector. Built once
    at start up and read-only afterwards; the search form and the web
    application get it passed explicitly. """

    def __init__(self, routers=(), routing_instances=None):
        if routing_instances is None:
            routing_instances = {}
        self.routers = tuple(routers)
        self.routing_instances = {group: tuple(entries) for group, entries
                                  in routing_instances.items()}

    @classmethod
    async def initialize(cls, client):
        try:
            routers, routing_instances = await client.fetch_directory()
        except InitializationFailure as e:
            logger.error("Directory initialization failed: %s", e)
            raise
        logger.info("Loaded %d routers and %d routing instance groups",
                    len(routers), len(routing_instances))
        return cls(routers, routing_instances)

    @classmethod
    def from_json(cls, routers, routing_instances):
        return cls(parse_routers(routers),
                   parse_routing_instances(routing_instances))

    def __repr__(self):
        return "InstanceDirectory({!r}, {!r})".format(
            self.routers, self.routing_instances)
