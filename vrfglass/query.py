# coding: utf-8

import collections
import urllib.parse

import netaddr

MODES = ("MostSpecific", "Exact", "OrLonger", "Contains")
DEFAULT_MODE = "MostSpecific"
ALL_ROUTERS = "all"
DEFAULT_INSTANCE = "default"


class QueryError(Exception):
    pass


SubmitQuery = collections.namedtuple("SubmitQuery",
                                     ["mode", "value", "router",
                                      "route_distinguisher"])
SubmitQuery.__new__.__defaults__ = (DEFAULT_MODE, "", ALL_ROUTERS, None)


def _quote(value):
    return urllib.parse.quote(value, safe=":/@")


class SearchQuery(object):
    """ Canonical form of a route lookup. Encodes to the navigation string
    #/<mode>/<value>?Router=<name>&route_distinguisher=<rd>, where the path
    is left out for an empty value and each filter only appears when it
    differs from its default. """

    def __init__(self, mode=DEFAULT_MODE, value="", router=ALL_ROUTERS,
                 route_distinguisher=None):
        if mode not in MODES:
            raise QueryError("Invalid query mode {}".format(mode))
        self.mode = mode
        self.value = value
        self.router = router
        if route_distinguisher == DEFAULT_INSTANCE:
            route_distinguisher = None
        self.route_distinguisher = route_distinguisher

    @property
    def filters(self):
        filters = []
        if self.router != ALL_ROUTERS:
            filters.append(("Router", self.router))
        if self.route_distinguisher is not None:
            filters.append(("route_distinguisher", self.route_distinguisher))
        return filters

    @property
    def value_type(self):
        if not self.value:
            return None
        try:
            netaddr.IPNetwork(self.value)
        except (netaddr.core.AddrFormatError, ValueError):
            return "hostname"
        return "ip-lookup"

    def to_string(self):
        res = "#/"
        if self.value != "":
            res += "{}/{}".format(self.mode, _quote(self.value))
        filters = self.filters
        if filters:
            res += "?" + "&".join("{}={}".format(key, _quote(value))
                                  for key, value in filters)
        return res

    @classmethod
    def parse(cls, string):
        if string.startswith("#"):
            string = string[1:]
        if string.startswith("/"):
            string = string[1:]
        path, _, params = string.partition("?")
        mode, sep, value = path.partition("/")
        if sep:
            path = mode + sep + urllib.parse.unquote(value)
        return cls.from_path(path, dict(
            urllib.parse.parse_qsl(params, keep_blank_values=True)))

    @classmethod
    def from_path(cls, path, params):
        """ Builds a query from an already decoded <mode>/<value> path and a
        mapping of filter parameters. """
        kwargs = {}
        if path:
            mode, _, value = path.partition("/")
            if mode not in MODES:
                raise QueryError("Invalid query mode {}".format(mode))
            kwargs["mode"] = mode
            kwargs["value"] = value
        if "Router" in params:
            kwargs["router"] = params["Router"]
        if "route_distinguisher" in params:
            kwargs["route_distinguisher"] = params["route_distinguisher"]
        return cls(**kwargs)

    def __eq__(self, other):
        if not isinstance(other, SearchQuery):
            return NotImplemented
        return (self.mode, self.value, self.router,
                self.route_distinguisher) == (other.mode, other.value,
                                              other.router,
                                              other.route_distinguisher)

    def __hash__(self):
        return hash((self.mode, self.value, self.router,
                     self.route_distinguisher))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "SearchQuery({!r}, {!r}, {!r}, {!r})".format(
            self.mode, self.value, self.router, self.route_distinguisher)


def build_query(submit, offer_instances):
    """ Turns a submitted form into a SearchQuery. The routing instance is
    only taken over when the form offered an instance selector. """
    route_distinguisher = None
    if offer_instances:
        route_distinguisher = submit.route_distinguisher
    return SearchQuery(submit.mode, submit.value, submit.router,
                       route_distinguisher)


def build_query_string(submit, offer_instances):
    return build_query(submit, offer_instances).to_string()
