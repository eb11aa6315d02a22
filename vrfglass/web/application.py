# coding: utf-8

import flask

import vrfglass.query
import vrfglass.search
import vrfglass.web.helpers


class MainApp(vrfglass.web.helpers.BaseApp):
    DEFAULT_CONFIG = {
        "api_url": "http://127.0.0.1:3000",
        "timeout": 10.0,
        "auto_submit": True,
    }

    def __init__(self, directory, config=None):
        vrfglass.web.helpers.BaseApp.__init__(self, config=config)
        self.directory = directory

        self.route_to("/", "GET", self.handle_index)
        self.route_to("/lookup", "GET", self.handle_lookup)
        self.route_to("/lookup/", "GET", self.handle_lookup)
        self.route_to("/lookup/<path:path>", "GET", self.handle_lookup)
        self.route_to("/search", "POST", self.handle_search)

    def search_form(self, current=None):
        return vrfglass.search.SearchForm(
            self.directory, current,
            auto_submit=self.settings["auto_submit"])

    def handle_index(self):
        return self.render_template("index.html", form=self.search_form())

    def handle_lookup(self, path=""):
        try:
            current = vrfglass.query.SearchQuery.from_path(
                path, self.request.args)
        except vrfglass.query.QueryError as e:
            flask.abort(400, str(e))
        return self.render_template("index.html",
                                    form=self.search_form(current))

    def handle_search(self):
        try:
            location = self.search_form().submit(self.request.form)
        except vrfglass.query.QueryError as e:
            flask.abort(400, str(e))
        return flask.redirect("/" + location)
