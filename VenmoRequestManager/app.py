"""
Venmo Request Manager - Flask form application

Two views over one SplitState:
    roster - add and remove participants, then move on to items
    items  - add shared items, remove them per participant, see totals

Every action is a POST that redirects back to "/". Invalid input is
rejected silently: the redirect happens and nothing changes.

Usage:
    flask --app app run
"""

import io
from datetime import date

from flask import Flask, current_app, make_response, redirect, render_template, request, url_for
from markupsafe import escape

# PDF generation - using xhtml2pdf for HTML to PDF conversion
from xhtml2pdf import pisa

from config import config as default_config
from items import add_item_for_all, add_item_for_subset, remove_item
from logging_config import get_app_logger
from participants import add_participant, get_participants, remove_participant
from screens import ITEMS, ROSTER, can_advance, go_to_items, go_to_roster
from splitter import explain_participant_total, grand_total
from state import SplitState
from utils import format_currency


# ------------------ HELPERS ------------------

def get_state() -> SplitState:
    return current_app.extensions["split_state"]


def _currency(amount) -> str:
    return format_currency(amount, current_app.config["CURRENCY_SYMBOL"])


def participant_cards(state):
    """One breakdown per participant, in roster order, for the items view and the PDF."""
    return [explain_participant_total(state, p.participant_id) for p in get_participants(state)]


# ------------------ APP FACTORY ------------------

def create_app(settings=None, state=None) -> Flask:
    settings = settings or default_config

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.SECRET_KEY
    app.config["CURRENCY_SYMBOL"] = settings.CURRENCY_SYMBOL
    app.extensions["split_state"] = state if state is not None else SplitState.from_config(settings)
    app.jinja_env.filters["currency"] = _currency

    logger = get_app_logger(settings.log_level)
    logger.info(
        "Form app ready (item_removal_mode=%s, cascade_participant_removal=%s)",
        app.extensions["split_state"].item_removal_mode,
        app.extensions["split_state"].cascade_participant_removal
    )

    register_routes(app)
    return app


# ------------------ ROUTES ------------------

def register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        state = get_state()
        return render_template(
            "index.html",
            screen=state.screen,
            roster_screen=ROSTER,
            items_screen=ITEMS,
            participants=get_participants(state),
            cards=participant_cards(state) if state.screen == ITEMS else [],
            can_advance=can_advance(state),
            grand_total=grand_total(state)
        )

    # ------------------ ROSTER ------------------

    @app.route("/participants", methods=["POST"])
    def add_person():
        add_participant(get_state(), request.form.get("name", ""))
        return redirect(url_for("index"))

    @app.route("/participants/<int:participant_id>/remove", methods=["POST"])
    def remove_person(participant_id):
        remove_participant(get_state(), participant_id)
        return redirect(url_for("index"))

    # ------------------ SCREENS ------------------

    @app.route("/next", methods=["POST"])
    def next_screen():
        state = get_state()
        state.screen = go_to_items(state)
        return redirect(url_for("index"))

    @app.route("/back", methods=["POST"])
    def previous_screen():
        state = get_state()
        state.screen = go_to_roster(state)
        return redirect(url_for("index"))

    # ------------------ ITEMS ------------------

    @app.route("/items", methods=["POST"])
    def add_item():
        state = get_state()
        name = request.form.get("name", "")
        price = request.form.get("price", "")

        if request.form.get("split_all"):
            add_item_for_all(state, name, price)
        else:
            add_item_for_subset(state, name, price, request.form.getlist("shared_with"))

        return redirect(url_for("index"))

    @app.route("/participants/<int:participant_id>/items/<int:item_id>/remove", methods=["POST"])
    def remove_person_item(participant_id, item_id):
        remove_item(get_state(), participant_id, item_id)
        return redirect(url_for("index"))

    # ------------------ PDF EXPORT ------------------
    # Request summary: every participant's items, per-head shares and total

    @app.route("/export-pdf")
    def export_pdf():
        state = get_state()
        cards = participant_cards(state)

        sections = []
        for card in cards:
            rows = ''.join([
                f"<tr><td>{escape(i['name'])}</td><td>{_currency(i['price'])}</td>"
                f"<td>{i['num_sharers']}</td><td>{_currency(i['share'])}</td></tr>"
                for i in card["items"]
            ]) or '<tr><td colspan="4">No items</td></tr>'
            sections.append(f"""
            <h2>{escape(card['name'])}</h2>
            <table>
                <tr><th>Item</th><th>Price</th><th>Split</th><th>Share</th></tr>
                {rows}
            </table>
            <p class="total"><strong>Total:</strong> {_currency(card['total'])}</p>
            """)

        html_content = f"""
        <!DOCTYPE html>
        <html>
        <head>
            <meta charset="UTF-8">
            <style>
                body {{ font-family: Arial, sans-serif; padding: 20px; color: #333; }}
                h1 {{ color: #2563eb; border-bottom: 2px solid #2563eb; padding-bottom: 10px; }}
                h2 {{ color: #444; margin-top: 25px; }}
                table {{ width: 100%; border-collapse: collapse; margin: 15px 0; }}
                th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
                th {{ background: #2563eb; color: white; }}
                .total {{ text-align: right; }}
                .footer {{ margin-top: 30px; text-align: center; color: #888; font-size: 12px; }}
            </style>
        </head>
        <body>
            <h1>Venmo Requests</h1>
            <p><strong>Generated:</strong> {date.today().strftime('%B %d, %Y')}</p>
            <p><strong>Total requested:</strong> {_currency(grand_total(state))}</p>
            {''.join(sections) or '<p>No participants yet</p>'}
            <div class="footer">
                <p>Generated by Venmo Request Manager</p>
            </div>
        </body>
        </html>
        """

        # Convert HTML to PDF
        pdf_buffer = io.BytesIO()
        pisa.CreatePDF(io.StringIO(html_content), dest=pdf_buffer)
        pdf_buffer.seek(0)

        response = make_response(pdf_buffer.read())
        response.headers['Content-Type'] = 'application/pdf'
        response.headers['Content-Disposition'] = 'attachment; filename=venmo_requests.pdf'
        return response

    @app.route("/health")
    def health_check():
        return {"status": "healthy", "service": "Venmo Request Manager"}


app = create_app()


if __name__ == "__main__":
    app.run(host=default_config.HOST, port=default_config.PORT)
