"""
A small documented API used by the CLI tests.

Exposes the same registrations in every shape the CLI accepts.
"""

from aiohttp import web

from schemabind import APISpec, Info, RouteTable, expand_macros, mount_docs
from tests.fixtures.models import User

spec = APISpec(Info(title="Users API", version="1.0.0"))

table = RouteTable()
get_user = table.add("/users/{id:int}", "GET", name="getUser")
list_users = table.add("/users", "GET", name="listUsers")

spec.route(get_user).summary("Get a user").tags("users").response(200, User)
spec.op("listUsers").summary("List users").tags("users").response(200, list[User])

pair = (spec, table)
document = spec.build(table)


def make_pair() -> tuple[APISpec, RouteTable]:
    return spec, table


async def handle_user(request: web.Request) -> web.Response:
    return web.json_response({"id": int(request.match_info["id"]), "name": "Ada"})


def create_app() -> web.Application:
    application = web.Application()
    app_spec = APISpec(Info(title="Served API", version="2.0.0"))
    route = application.router.add_get(expand_macros("/users/{id:int}"), handle_user)
    app_spec.route(route).summary("Get a user").response(200, User)
    mount_docs(application, app_spec)
    return application


def make_served_pair() -> tuple[APISpec, web.Application]:
    application = web.Application()
    served = APISpec(Info(title="Paired API", version="3.0.0"))
    route = application.router.add_get(expand_macros("/users/{id:int}"), handle_user)
    served.route(route).summary("Get a user").response(200, User)
    return served, application


def make_table_app() -> web.Application:
    application = web.Application()
    table_spec = APISpec(Info(title="Table API", version="1.0.0"))
    routes = RouteTable()
    mount_docs(application, table_spec, source=routes)
    table_spec.route(routes.add("/items/{id:int}", "GET")).summary("Get an item")
    return application


app = create_app()
bare_app = web.Application()
not_a_target = 42
