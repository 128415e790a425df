#!/usr/bin/env python3
"""
Thesis Topic Suggester - Dash Web Application
Enter research keywords and get AI-suggested thesis topics as cards.
"""

import os
import sys

import dash
from dash import dcc, html, Input, Output, State
import dash_bootstrap_components as dbc
from dotenv import load_dotenv
from loguru import logger

# Ensure environment variables (e.g., API_KEY) are loaded
load_dotenv()

from thesis_topics import messages
from thesis_topics.credentials import get_credential_selector
from thesis_topics.flow import Completion, FlowPhase, RequestState, TopicRequestFlow
from thesis_topics.llm.schemas import ThesisTopic


flow = TopicRequestFlow(credential_selector=get_credential_selector())

HIDDEN = {"display": "none"}
SHOWN = {"display": "block"}


def load_state(data) -> RequestState:
    """Rebuild the request state kept in the browser store."""
    return RequestState.model_validate(data or {})


def topic_card(topic: ThesisTopic):
    """Card for one suggested topic; empty sections are left out."""
    body = [
        html.H5(topic.title, className="card-title fw-semibold"),
        html.P(topic.description, className="card-text text-muted", style={"textAlign": "justify"}),
    ]

    if topic.keywords:
        body.append(html.Div([
            html.P(messages.CARD_KEYWORDS, className="small fw-bold mb-1"),
            html.Div([
                dbc.Badge(keyword, color="primary", pill=True, className="me-1 mb-1")
                for keyword in topic.keywords
            ]),
        ], className="mb-3"))

    if topic.potentialResearchQuestions:
        body.append(html.Div([
            html.P(messages.CARD_QUESTIONS, className="small fw-bold mb-1"),
            html.Ul([html.Li(question) for question in topic.potentialResearchQuestions],
                    className="small text-muted"),
        ]))

    return dbc.Card(dbc.CardBody(body), className="h-100 shadow-sm")


def render_error(state: RequestState):
    if not state.error:
        return ""
    return dbc.Alert([html.Strong(messages.ERROR_PREFIX), state.error], color="danger", className="mb-0")


def render_results(state: RequestState):
    if state.topics is None:
        return ""
    if not state.topics:
        if state.credential_prompt_visible:
            return ""
        return dbc.Alert([
            html.Strong(messages.NO_TOPICS_TITLE), " ", messages.NO_TOPICS_HINT,
        ], color="info", className="text-center")

    return html.Div([
        html.H2(messages.RESULTS_HEADING, className="text-center fw-bold mb-4"),
        dbc.Row([dbc.Col(topic_card(topic), md=6, className="mb-4") for topic in state.topics]),
    ], className="mt-4")


# Initialize Dash app with Bootstrap theme
app = dash.Dash(__name__, external_stylesheets=[dbc.themes.BOOTSTRAP])
app.title = messages.APP_TITLE

credential_prompt = dbc.Alert([
    html.H5(messages.CREDENTIAL_PROMPT_TITLE, className="fw-bold"),
    html.P(messages.CREDENTIAL_PROMPT_BODY, className="mt-2"),
    html.P([
        messages.CREDENTIAL_BILLING_PREFIX,
        html.A(messages.CREDENTIAL_BILLING_LINK, href=messages.CREDENTIAL_BILLING_URL,
               target="_blank", rel="noopener noreferrer"),
        messages.CREDENTIAL_BILLING_SUFFIX,
    ], className="small"),
    dbc.Button(messages.CREDENTIAL_BUTTON, id="credential-btn", color="warning", className="mt-2"),
], id="credential-prompt", color="warning", is_open=False, className="mb-4")

keywords_form = html.Div([
    dbc.Label(messages.KEYWORDS_LABEL, html_for="keywords-input", className="fs-5"),
    dbc.Textarea(
        id="keywords-input",
        rows=4,
        placeholder=messages.KEYWORDS_PLACEHOLDER,
        value="",
    ),
    dbc.FormText(messages.KEYWORDS_HELP),
    dbc.Button(
        messages.SUBMIT_LABEL,
        id="submit-btn",
        color="primary",
        size="lg",
        disabled=True,
        className="w-100 mt-4",
    ),
], id="keywords-form", style=SHOWN)

loading_hint = html.Div([
    dbc.Spinner(color="primary"),
    html.P(messages.LOADING_TITLE, className="mt-3 fs-5"),
    html.P(messages.LOADING_HINT, className="small text-muted"),
], id="loading-hint", className="text-center p-4", style=HIDDEN)

# Define the app layout
app.layout = html.Div(dbc.Container([
    dbc.Row([
        dbc.Col([
            html.H1(messages.APP_TITLE, className="text-center fw-bold text-primary mb-3"),
            html.P(messages.APP_SUBTITLE, className="text-center text-muted mb-5"),
        ])
    ]),

    dbc.Row([
        dbc.Col([
            dbc.Card([
                dbc.CardBody([
                    credential_prompt,
                    keywords_form,
                    html.Div(id="error-area", className="mt-4"),
                    loading_hint,
                    html.Div(id="results-area"),
                ])
            ], className="shadow")
        ], lg={"size": 10, "offset": 1}),
    ]),

    html.Footer(html.P(messages.FOOTER), className="text-center text-muted small py-4 mt-4"),

    # Request lifecycle state
    dcc.Store(id="request-state", data=RequestState().model_dump(mode="json")),
    dcc.Store(id="pending-request"),
    dcc.Store(id="completion"),

], fluid=True, className="py-4"), dir="rtl", lang="fa")


@app.callback(
    Output("submit-btn", "disabled"),
    Input("keywords-input", "value"),
)
def toggle_submit(keywords):
    return not (keywords or "").strip()


@app.callback(
    [Output("request-state", "data"),
     Output("pending-request", "data")],
    Input("submit-btn", "n_clicks"),
    [State("keywords-input", "value"),
     State("request-state", "data")],
    prevent_initial_call=True,
)
def submit_keywords(n_clicks, keywords, state_data):
    state = flow.begin_submit(load_state(state_data), keywords or "")
    if state.phase is not FlowPhase.SUBMITTING:
        return state.model_dump(mode="json"), dash.no_update
    pending = {"request_id": state.request_id, "keywords": state.keywords}
    return state.model_dump(mode="json"), pending


@app.callback(
    Output("completion", "data"),
    Input("pending-request", "data"),
    running=[
        (Output("submit-btn", "disabled"), True, False),
        (Output("keywords-input", "disabled"), True, False),
        (Output("loading-hint", "style"), SHOWN, HIDDEN),
    ],
    prevent_initial_call=True,
)
def run_completion(pending):
    completion = flow.execute(pending["request_id"], pending["keywords"])
    return completion.model_dump(mode="json")


@app.callback(
    Output("request-state", "data", allow_duplicate=True),
    Input("completion", "data"),
    # Read when the completion arrives, so a newer submission is seen
    State("request-state", "data"),
    prevent_initial_call=True,
)
def apply_completion(completion_data, state_data):
    state = flow.complete(load_state(state_data), Completion.model_validate(completion_data))
    return state.model_dump(mode="json")


@app.callback(
    Output("request-state", "data", allow_duplicate=True),
    Input("credential-btn", "n_clicks"),
    State("request-state", "data"),
    prevent_initial_call=True,
)
def reselect_credential(n_clicks, state_data):
    state = flow.reselect_credential(load_state(state_data))
    return state.model_dump(mode="json")


@app.callback(
    [Output("credential-prompt", "is_open"),
     Output("keywords-form", "style"),
     Output("error-area", "children"),
     Output("results-area", "children")],
    Input("request-state", "data"),
)
def render_state(state_data):
    state = load_state(state_data)
    form_style = HIDDEN if state.credential_prompt_visible else SHOWN
    return state.credential_prompt_visible, form_style, render_error(state), render_results(state)


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level=os.getenv("LOG_LEVEL", "INFO"))

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8050"))
    logger.info("Starting Thesis Topic Suggester application...")
    logger.info(f"Browse to http://{host}:{port} to access the application")
    app.run(host=host, port=port, debug=os.getenv("DEBUG", "").lower() in ("1", "true", "yes"))
