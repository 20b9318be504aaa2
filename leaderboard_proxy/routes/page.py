# leaderboard_proxy/routes/page.py
"""Server-rendered login and leaderboard page.

The token lives in the browser's session cookie. Every form post runs one
action on a :class:`LeaderboardPage`, flashes its notifications and redirects
back to ``/``, where the leaderboard is fetched again.
"""

from flask import (Blueprint, request, redirect, url_for, render_template,
                   flash, current_app, session)
import logging

from leaderboard_proxy.ui.client import ProxyClient
from leaderboard_proxy.ui.controller import LeaderboardPage
from leaderboard_proxy.ui.state import LeaderboardEntry, PageState
from leaderboard_proxy.utils.validation import to_number

logger = logging.getLogger(__name__)

bp = Blueprint('page', __name__)

FLASH_CATEGORIES = {'destructive': 'error', 'default': 'success'}


def build_page(entries=()):
    """Rebuild the page component for this request from the session cookie"""
    base_url = current_app.config['PROXY_BASE_URL']
    timeout_ms = current_app.config.get('UPSTREAM_TIMEOUT_MS')
    client = ProxyClient(base_url,
                         timeout=timeout_ms / 1000.0 if timeout_ms else None)
    state = PageState(token=session.get('token'),
                      email=session.get('email', ''),
                      entries=tuple(entries))
    return LeaderboardPage(
        client,
        state,
        sort_by_score=current_app.config.get('LEADERBOARD_SORT_BY_SCORE', True),
        auto_refresh=False)


def flash_notifications(page):
    for notification in page.take_notifications():
        flash(notification.description,
              FLASH_CATEGORIES.get(notification.variant, 'info'))


@bp.route('/', methods=['GET'])
def index():
    page = build_page()

    if page.state.authenticated:
        page.refresh()
        flash_notifications(page)
        return render_template('leaderboard.html', ranked=page.state.ranked())

    email, password = page.state.email, ''
    if request.args.get('demo'):
        email = current_app.config['DEMO_EMAIL']
        password = current_app.config['DEMO_PASSWORD']
    return render_template('login.html', email=email, password=password)


@bp.route('/login', methods=['POST'])
def login():
    email = request.form.get('email', '')
    page = build_page()
    page.login(email, request.form.get('password', ''))

    session['email'] = email
    if page.state.authenticated:
        session['token'] = page.state.token
    flash_notifications(page)
    return redirect(url_for('page.index'))


@bp.route('/logout', methods=['POST'])
def logout():
    page = build_page()
    page.logout()
    session.pop('token', None)
    flash_notifications(page)
    return redirect(url_for('page.index'))


@bp.route('/scores/<int:entry_id>', methods=['POST'])
def change_score(entry_id):
    if not session.get('token'):
        return redirect(url_for('page.index'))

    # The row as it was rendered; it may be stale if another update landed
    try:
        row = LeaderboardEntry(entry_id, request.form['name'],
                               to_number(request.form['score']))
    except (KeyError, ValueError):
        logger.warning(f"Ignoring score change for entry {entry_id}: bad row data")
        return redirect(url_for('page.index'))

    page = build_page(entries=[row])
    action = request.form.get('action')
    if action == 'decrement':
        page.decrement(entry_id)
    elif action == 'increment':
        page.increment(entry_id)
    elif action == 'set':
        page.set_score(entry_id, request.form.get('value'))
    else:
        logger.warning(f"Unknown score action: {action}")

    flash_notifications(page)
    return redirect(url_for('page.index'))
