"""
Report API endpoint constants, prompt template and fallback messages.

Centralizing these values makes it easy to swap the model, the API version
or the report wording.
"""


# Generative Language API Endpoints
class ReportAPIEndpoints:
    """Generative Language API endpoint paths."""

    API_VERSION = "v1beta"
    GENERATE_CONTENT = f"/{API_VERSION}/models/{{model}}:generateContent"

    @classmethod
    def generate_content(cls, model: str) -> str:
        """
        Get the generateContent endpoint for a model.

        Args:
            model: Model name, e.g. gemini-2.5-flash

        Returns:
            Formatted endpoint path
        """
        return cls.GENERATE_CONTENT.format(model=model)


# API Configuration Constants
class APIConstants:
    """General API configuration constants."""

    # HTTP Headers
    CONTENT_TYPE_JSON = "application/json"
    API_KEY_HEADER = "x-goog-api-key"

    # Analysis needs no extended reasoning
    THINKING_BUDGET = 0


class ReportPrompts:
    """Instruction text sent with every report request."""

    COMPANY_NAME = "Hoa Cương"

    DEFAULT_QUERY = (
        "Analyse the performance of the planting areas and the purchasing trends, "
        "and propose improvements to yield and profit. Assess produce quality "
        "based on the purchase history."
    )

    TEMPLATE = """
You are an agricultural AI expert supporting the company "{company}".

Current system data (JSON):
{data_json}

Request:
{query}

Answer in well-formatted Markdown with clear headings and bullet points. Language: {language}.
"""


class ReportMessages:
    """User-facing text returned instead of a report when generation fails."""

    NOT_CONFIGURED = "Error: the report API key is not configured."
    EMPTY = "Unable to generate a report at this time."
    FAILED = "An error occurred while connecting to the AI service. Please try again later."
