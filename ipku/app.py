import logging

from flask import Flask, jsonify, request

from ipku import render
from ipku.config import Settings, parse_args
from ipku.errors import EncodingFailure, IPKUError
from ipku.metadata import IPKU
from ipku.negotiation import Format, negotiate
from ipku.resolver import join_host_port, resolve_ip

logger = logging.getLogger(__name__)

TEXT = {'Content-Type': 'text/plain; charset=utf-8'}
HTML = {'Content-Type': 'text/html; charset=utf-8'}

NOT_FOUND_BODY = "404 page not found\n"

ANY_METHOD = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def get_transport_address():
    """
    Rebuild the peer's "host:port" from the WSGI environ
    """
    return join_host_port(request.environ.get('REMOTE_ADDR', ''),
                          request.environ.get('REMOTE_PORT', ''))


def get_client_ip(settings):
    return resolve_ip(
        get_transport_address(),
        request.headers.get('X-Forwarded-For'),
        settings.behind_proxy,
    )


def json_response(payload):
    try:
        return jsonify(payload)
    except (TypeError, ValueError) as e:
        raise EncodingFailure(str(e)) from e


def encoding_error(e):
    logger.error(f"Error encoding response: {e}")
    return f"Error: {e}\n", 500, TEXT


def not_found(*args, **kwargs):
    return NOT_FOUND_BODY, 404, TEXT


def create_app(settings=None, metadata=IPKU):
    settings = settings or Settings()

    app = Flask(__name__)
    app.config['IPKU_SETTINGS'] = settings
    app.config['IPKU_METADATA'] = metadata

    @app.route('/')
    def index():
        """
        Report the caller's IP address
        """
        try:
            client_ip = get_client_ip(settings)
        except IPKUError as e:
            logger.error(f"Error resolving client IP: {e}")
            return f"Error: {e}.\n", 500, TEXT

        fmt = negotiate(request.headers)
        logger.info(f"Request from {client_ip} ({fmt.value})")

        if fmt is Format.TEXT:
            return render.ip_text(client_ip), 200, TEXT

        if fmt is Format.JSON:
            try:
                return json_response(render.ip_payload(client_ip)), 200
            except EncodingFailure as e:
                return encoding_error(e)

        return render.ip_html(client_ip), 200, HTML

    @app.route('/about')
    def about():
        """
        Describe this service
        """
        fmt = negotiate(request.headers)
        logger.info(f"About requested ({fmt.value})")

        if fmt is Format.TEXT:
            return render.about_text(metadata), 200, TEXT

        if fmt is Format.JSON:
            try:
                return json_response(render.about_payload(metadata)), 200
            except EncodingFailure as e:
                return encoding_error(e)

        return render.about_html(metadata), 200, HTML

    # Exact paths only: everything else, "/about/" included, is a 404 for any method
    app.add_url_rule('/<path:path>', view_func=not_found, methods=ANY_METHOD,
                     provide_automatic_options=False)
    app.register_error_handler(404, not_found)
    return app


def main(argv=None):
    settings = parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    app = create_app(settings)
    logger.info(f"IPKU server running on port: {settings.port}")
    app.run(host=settings.host, port=int(settings.port), debug=False)


if __name__ == '__main__':
    main()
