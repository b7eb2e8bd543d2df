"""
Travel suggestions from the generative model.

Each assistant type has its own prompt template. All prompts ask for a
short answer so the result fits on one screen.
"""

import logging

from .client import generate_text

logger = logging.getLogger(__name__)

LENGTH_HINT = "Keep the response concise, between 15 and 20 lines."

PROMPT_TEMPLATES = {
    'itinerary': (
        "Generate a {days}-day travel itinerary for {destination} focusing on {interests}. "
        "Include activities, places to visit, and estimated times."
    ),
    'packing-list': (
        "Create a packing list for a trip to {destination} for {duration} days, "
        "considering the weather in {season}."
    ),
    'budget-estimate': (
        "Provide a budget estimate for a trip to {destination} for {duration} days, "
        "including categories like accommodation, flights, food, and activities."
    ),
}


class InvalidAssistantTypeError(Exception):
    pass


def build_prompt(assistant_type: str, **form) -> str:
    """
    Fill in the template for the given type.

    Raises:
        InvalidAssistantTypeError: If the type has no template
    """
    try:
        template = PROMPT_TEMPLATES[assistant_type]
    except KeyError:
        raise InvalidAssistantTypeError("Invalid AI assistant type")
    return f"{template.format(**form)} {LENGTH_HINT}"


def generate_suggestion(assistant_type: str, **form) -> str:
    """
    Build the prompt and ask the model.

    Raises:
        InvalidAssistantTypeError: If the type has no template
        AIProviderError: If the provider call fails
    """
    prompt = build_prompt(assistant_type, **form)
    logger.info("Generating %s suggestion for %s", assistant_type, form.get('destination'))
    return generate_text(prompt)
