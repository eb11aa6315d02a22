# coding: utf-8

import vrfglass.query
from vrfglass.query import ALL_ROUTERS, DEFAULT_INSTANCE, MODES


def _instance_sort_key(entry):
    return (entry.route_distinguisher, entry.display_name is None,
            entry.display_name or "")


def deduplicated_routing_instances(directory):
    """ Flattens all groups of the routing instance directory and returns
    every distinct (route_distinguisher, display_name) pair once, sorted.
    Entries with the same route distinguisher but different names are kept
    apart. """
    seen = {}
    for entries in directory.routing_instances.values():
        for entry in entries:
            key = (entry.route_distinguisher, entry.display_name)
            seen.setdefault(key, entry)
    return sorted(seen.values(), key=_instance_sort_key)


def router_options(routers):
    options = [(ALL_ROUTERS, "on all")]
    names = set()
    for router in routers:
        if router.client_name in names:
            continue
        names.add(router.client_name)
        options.append((router.client_name, "on " + router.client_name))
    return options


def instance_options(entries):
    entries = list(entries)
    if len(entries) <= 1:
        return []
    return [(entry.route_distinguisher, entry.label) for entry in entries]


class SearchForm(object):
    """ Model of the lookup form for one rendering: the options offered
    and the pre-selection taken from the current query. """

    mode_field = "query-mode"
    value_field = "input-field"
    router_field = "router-sel"
    instance_field = "table-sel"

    def __init__(self, directory, current=None, auto_submit=True):
        self.directory = directory
        if current is None:
            current = vrfglass.query.SearchQuery()
        elif isinstance(current, str):
            current = vrfglass.query.SearchQuery.parse(current)
        self.current = current
        self.auto_submit = auto_submit
        self.modes = MODES
        self.routers = router_options(directory.routers)
        self.instances = instance_options(
            deduplicated_routing_instances(directory))
        if self.instances:
            self.instances.insert(0, (DEFAULT_INSTANCE, "default instance"))

    @property
    def offers_instances(self):
        return bool(self.instances)

    @property
    def selected_mode(self):
        return self.current.mode

    @property
    def selected_value(self):
        return self.current.value

    @property
    def selected_router(self):
        return self.current.router

    @property
    def selected_instance(self):
        if self.current.route_distinguisher is None:
            return DEFAULT_INSTANCE
        return self.current.route_distinguisher

    def read(self, form_data):
        """ Builds the submit command from posted form fields. """
        return vrfglass.query.SubmitQuery(
            mode=form_data.get(self.mode_field,
                               vrfglass.query.DEFAULT_MODE),
            value=form_data.get(self.value_field, ""),
            router=form_data.get(self.router_field, ALL_ROUTERS),
            route_distinguisher=form_data.get(self.instance_field))

    def query(self, form_data):
        return vrfglass.query.build_query(self.read(form_data),
                                          self.offers_instances)

    def submit(self, form_data):
        return self.query(form_data).to_string()

    def prefilled(self):
        """ Form data as the browser would send it back for an unchanged
        form. """
        form_data = {
            self.mode_field: self.selected_mode,
            self.value_field: self.selected_value,
            self.router_field: self.selected_router,
        }
        if self.offers_instances:
            form_data[self.instance_field] = self.selected_instance
        return form_data
