"""
Response bodies for the three output formats.

Every function here is pure: the same inputs always give the same bytes.
"""
from markupsafe import escape

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
    <head>
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>%(title)s</title>
        <style>
            * {
                font-family: sans-serif;
                font-size: 1.2rem;
            }
            @media (prefers-color-scheme: dark) {
                body {
                    background-color: #121212;
                    color: white;
                }
                table, th, td {
                    border: 5px solid white;
                    border-collapse: collapse;
                }
            }
            @media (prefers-color-scheme: light) {
                table, th, td {
                    border: 5px solid black;
                    border-collapse: collapse;
                }
            }
            main {
                display: grid;
                place-items: center;
                min-height: 100vh;
            }
            th, td {
                padding: 0.5rem;
                text-align: center;
            }
        </style>
    </head>
    <body>
        <main>
            <section>%(content)s</section>
        </main>
    </body>
</html>"""

IP_TABLE = """<table>
                <tr><th>IP Address</th></tr>
                <tr><td>%(ip)s</td></tr>
            </table>"""

ABOUT_TABLE = """<table>
                <tr><th>Name</th><td>%(name)s</td></tr>
                <tr><th>Description</th><td>%(description)s</td></tr>
                <tr><th>Version</th><td>%(version)s</td></tr>
                <tr><th>Author</th><td>%(author)s &lt;%(author_email)s&gt;</td></tr>
                <tr><th>Repository</th><td><a href="%(repository)s">%(repository)s</a></td></tr>
            </table>"""

ABOUT_TEXT = (
    "Name        : %(name)s\n"
    "Description : %(description)s\n"
    "Version     : %(version)s\n"
    "Author      : %(author)s <%(author_email)s>\n"
    "Repository  : %(repository)s\n"
)


def page(title, content):
    """Wrap ``content`` (already HTML) in the shared page layout."""
    return PAGE_TEMPLATE % {'title': escape(title), 'content': content}


def ip_text(ip):
    return f"{ip}\n"


def about_text(metadata):
    return ABOUT_TEXT % vars(metadata)


def ip_payload(ip):
    return {'ipAddress': ip}


def about_payload(metadata):
    return metadata.as_dict()


def ip_html(ip):
    return page('IPKU', IP_TABLE % {'ip': escape(ip)})


def about_html(metadata):
    fields = {key: escape(value) for key, value in vars(metadata).items()}
    return page(f"About {metadata.name}", ABOUT_TABLE % fields)
