# Patch before Flask and requests are imported so the page's calls to the
# /api routes of this process yield to the hub instead of blocking it
from gevent import monkey
monkey.patch_all()

from leaderboard_proxy import create_app
from gevent.pywsgi import WSGIServer

app = create_app()

if __name__ == '__main__':
    http_server = WSGIServer((app.config['HOST'], app.config['PORT']), app)
    app.logger.info(
        f"Serving on {app.config['HOST']}:{app.config['PORT']}, "
        f"upstream {app.config['UPSTREAM_BASE_URL']}")
    http_server.serve_forever()
