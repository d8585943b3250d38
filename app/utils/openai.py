import os
from typing import Optional

from dotenv import load_dotenv
from openai import OpenAI


def get_openai_client(default_api_key: Optional[str] = None) -> OpenAI:
    """Get OpenAI client with fresh environment variables"""
    # Reload .env so a rotated key is picked up without a restart
    load_dotenv(override=True)
    api_key = os.getenv("OPENAI_API_KEY") or default_api_key

    if not api_key:
        raise ValueError("OPENAI_API_KEY not found in environment variables")

    return OpenAI(api_key=api_key)
