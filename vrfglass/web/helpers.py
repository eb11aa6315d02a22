# coding: utf-8

import json

import flask
import jinja2


class BaseApp(flask.Flask):
    __jinja2_env = None
    _settings = None
    DEFAULT_CONFIG = {}

    def __init__(self, config=None):
        flask.Flask.__init__(self, "vrfglass.web")
        self.settings = config

    @property
    def _jinja2_env(self):
        if self.__jinja2_env is None:
            self.__jinja2_env = jinja2.Environment(
                loader=jinja2.PackageLoader("vrfglass.web", "templates"),
                autoescape=jinja2.select_autoescape(["html"]))
            self.__jinja2_env.filters["lookup_url"] = lookup_url
        return self.__jinja2_env

    @_jinja2_env.setter
    def _jinja2_env(self, new_value):
        self.__jinja2_env = new_value

    @property
    def settings(self):
        if self._settings is None:
            self.settings = None
        return self._settings

    @settings.setter
    def settings(self, new_value):
        if isinstance(new_value, str):
            new_value = json.loads(new_value)
        elif hasattr(new_value, "read"):
            new_value = json.load(new_value)
        settings = dict(self.DEFAULT_CONFIG)
        if new_value is not None:
            settings.update(new_value)
        self._settings = settings

    def route_to(self, rule, method, handler):
        self.add_url_rule(rule, "{}:{}".format(method, rule), handler,
                          methods=[method])

    def render_template(self, tpl, **kwargs):
        return self._jinja2_env.get_template(tpl).render(kwargs)

    @property
    def request(self):
        return flask.request


def lookup_url(query):
    """ Maps the navigation string #/<mode>/<value>?<filters> of a query to
    the server side /lookup/<mode>/<value>?<filters> page. """
    return "/lookup/" + str(query)[2:]
