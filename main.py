"""
Wordle Engine Server - Main Entry Point

This is the main entry point for the Wordle game server.
It loads the word list, restores saved games and starts the Flask application.
"""

import logging

from wordle_engine import create_app
from wordle_engine.config import Config, get_word_statistics, validate_word_list_integrity
from wordle_engine.services import GameRegistry, GameService, GameStorage, WordSource
from wordle_engine.utils.game_logger import game_logger


def build_game_service(config_class=Config) -> GameService:
    """
    Builds the engine from configuration and restores any saved games.

    An empty word list is allowed (new games then fail with
    EmptyVocabularyError); a malformed one stops startup with ValueError.
    """
    word_source = WordSource.from_file(config_class.WORD_LIST_PATH)
    words = list(word_source.words)
    if words:
        validate_word_list_integrity(words)
        stats = get_word_statistics(words)
        print(f"✓ Loaded {len(word_source)} words from {config_class.WORD_LIST_PATH}")
        game_logger.logger.info(f"Word list loaded: {stats['total_words']} words")
    else:
        print(f"✗ Word list {config_class.WORD_LIST_PATH} is empty")
        game_logger.log_system_event(
            'empty_word_list', level=logging.WARNING, path=config_class.WORD_LIST_PATH
        )

    storage = GameStorage(config_class.SAVE_DATA_PATH)
    registry = GameRegistry(max_guesses=config_class.MAX_GUESSES)
    game_service = GameService(word_source, storage, registry)

    restored = game_service.load_saved_games()
    print(f"✓ Restored {restored} game(s) from {config_class.SAVE_DATA_PATH}")

    return game_service


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        game_service = build_game_service(Config)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(Config, game_service)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
