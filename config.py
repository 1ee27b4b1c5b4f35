import os
from dotenv import load_dotenv
from google.genai import types

load_dotenv()

class Config:
    """Application configuration"""
    GEMINI_API_KEY = os.getenv('GOOGLE_GEMINI_API_KEY')
    MODEL_ID = os.getenv('GEMINI_MODEL', 'gemini-2.5-flash')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    ADD_MORE_COUNT = 5
    # Idle sessions are dropped from memory after this many seconds
    SESSION_MAX_AGE = 3600

    FLASHCARD_CONFIG = types.GenerateContentConfig(
        temperature=0.7,
        top_p=0.95,
        top_k=20,
        candidate_count=1,
        max_output_tokens=8192,
        system_instruction=(
            "You are a professional educator creating clear, concise flashcards. "
            "Each flashcard should be formatted exactly as 'Term: Definition', one per line. "
            "Terms should be specific and definitions should be concise."
        )
    )

    # Centralized Prompts
    FLASHCARD_GENERATION_PROMPT = """Generate a list of flashcards for the topic of "{topic}". Each flashcard should have a term and a concise definition. Format the output as a list of "Term: Definition" pairs, with each pair on a new line. Ensure terms and definitions are distinct and clearly separated by a single colon. Here's an example output:
    Hello: Hola
    Goodbye: Adiós"""

    ADD_MORE_PROMPT = (
        'I am studying the topic of "{topic}". '
        "I already have flashcards for the following terms: {existing_terms}. "
        "Please generate {count} more unique flashcards related to the same topic. "
        "Do not repeat any of the terms I already have. "
        'Format the output as a list of "Term: Definition" pairs, with each pair on a new line.'
    )

class Messages:
    """User-facing status and error messages"""
    GENERATING = 'Generating flashcards...'
    GENERATING_MORE = 'Generating more flashcards...'
    TOPIC_REQUIRED = 'Please enter a topic or some terms and definitions.'
    ADD_MORE_REQUIRED = 'Cannot add more cards without an initial topic and set of cards.'
    EMPTY_RESPONSE = 'Failed to generate flashcards or received an empty response. Please try again.'
    EMPTY_RESPONSE_MORE = 'Failed to generate more flashcards. Please try again.'
    NO_VALID_CARDS = 'No valid flashcards could be generated from the response. Please check the format.'
    NO_NEW_CARDS = 'Could not generate any new unique flashcards. Try a broader topic.'
    ERROR = 'An error occurred: {detail}'
    ERROR_MORE = 'An error occurred while adding more cards: {detail}'
    UNKNOWN_ERROR = 'An unknown error occurred'
    IN_PROGRESS = 'Flashcards are already being generated. Please wait.'
