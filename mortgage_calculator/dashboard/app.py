"""Plotly Dash calculator form.

Five inputs, a Calculate button, the text report and a balance chart.

Run with: python -m mortgage_calculator.dashboard.app
"""

import math
from numbers import Real

from dash import Dash, html, dcc, callback, Input, Output, State
import plotly.graph_objects as go

from mortgage_calculator.config import settings
from mortgage_calculator.engine.calculator import calculate
from mortgage_calculator.models.loan import COMPOUNDING_FREQUENCIES, PaymentFrequency

INVALID_INPUT_MESSAGE = "Please enter valid inputs."

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

ERROR_STYLE = {"color": "#e94560", "fontWeight": "bold", "marginBottom": "1rem"}

REPORT_STYLE = {
    "fontFamily": "monospace",
    "fontSize": "0.85rem",
    "maxHeight": "480px",
    "overflowY": "auto",
    "backgroundColor": "#f7f7f9",
    "padding": "1rem",
}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "160px"})


def _empty_figure():
    fig = go.Figure()
    fig.update_layout(
        title="Remaining Balance",
        xaxis_title="Payment",
        yaxis_title="Balance",
    )
    return fig


def balance_figure(schedule):
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[row.index for row in schedule],
        y=[row.remaining_balance for row in schedule],
        mode="lines",
        name="Balance",
        line=dict(color="#1a1a2e", width=3),
    ))
    fig.update_layout(
        title="Remaining Balance",
        xaxis_title="Payment",
        yaxis_title="Balance",
        hovermode="x unified",
    )
    return fig


def run_calculation(principal, rate_pct, payments, payment_frequency, compounding_frequency):
    """Turn raw form values into (report, figure, error message).

    Missing or non-numeric fields never reach the calculator; range problems
    are reported with the calculator's own message.
    """
    values = (principal, rate_pct, payments, payment_frequency, compounding_frequency)
    if any(v is None or isinstance(v, bool) or not isinstance(v, Real) for v in values):
        return "", _empty_figure(), INVALID_INPUT_MESSAGE
    if not (math.isfinite(payments) and float(payments).is_integer()):
        return "", _empty_figure(), INVALID_INPUT_MESSAGE

    result = calculate(
        principal=principal,
        annual_interest_rate=rate_pct / 100,
        number_of_payments=int(payments),
        payment_frequency=int(payment_frequency),
        compounding_frequency=int(compounding_frequency),
    )
    if not result:
        return "", _empty_figure(), result.error.message
    return result.report, balance_figure(result.schedule), ""


app = Dash(__name__, title="Mortgage Calculator")

app.layout = html.Div([
    html.Nav([
        html.H1("Mortgage Calculator", style={"fontSize": "1.5rem", "margin": "0", "padding": "0 1rem"}),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    html.Div([
        html.Div([
            _field("Principal", dcc.Input(id="principal", type="number", placeholder="200000", style=FIELD_STYLE)),
            _field("Annual Interest Rate (%)", dcc.Input(id="rate", type="number", placeholder="6", style=FIELD_STYLE)),
            _field("Number of Payments", dcc.Input(id="payments", type="number", placeholder="360", step=1, style=FIELD_STYLE)),
        ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
        html.Div([
            _field("Payment Frequency", dcc.Dropdown(
                id="payment-frequency",
                options=[{"label": f.label, "value": f.value} for f in PaymentFrequency],
                value=PaymentFrequency.MONTHLY.value,
                clearable=False,
            )),
            _field("Compounding Frequency", dcc.Dropdown(
                id="compounding-frequency",
                options=[{"label": str(c), "value": c} for c in COMPOUNDING_FREQUENCIES],
                value=settings.default_compounding_frequency,
                clearable=False,
            )),
            html.Div([
                html.Label(" ", style={"fontSize": "0.85rem", "display": "block"}),
                html.Button("Calculate", id="calculate-btn", n_clicks=0, style=BTN_STYLE),
            ], style={"flex": "0 0 auto"}),
        ], style={"display": "flex", "gap": "1rem", "alignItems": "end", "marginBottom": "1.5rem"}),

        html.Div(id="error-banner", style=ERROR_STYLE),
        html.Pre(id="report-output", style=REPORT_STYLE),
        dcc.Graph(id="balance-chart", figure=_empty_figure()),
    ], style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"}),
])


@callback(
    Output("report-output", "children"),
    Output("balance-chart", "figure"),
    Output("error-banner", "children"),
    Input("calculate-btn", "n_clicks"),
    State("principal", "value"),
    State("rate", "value"),
    State("payments", "value"),
    State("payment-frequency", "value"),
    State("compounding-frequency", "value"),
    prevent_initial_call=True,
)
def on_calculate(n_clicks, principal, rate_pct, payments, payment_frequency, compounding_frequency):
    return run_calculation(principal, rate_pct, payments, payment_frequency, compounding_frequency)


if __name__ == "__main__":
    app.run(debug=settings.debug, port=settings.dashboard_port)
