"""
Nulldle Game Server - Main Entry Point

Loads the word list, initializes all services and starts the Flask-SocketIO
application.
"""

import sys
from nulldle import create_app
from nulldle.config import Config
from nulldle.exceptions import LoadError
from nulldle.services.dictionary import Dictionary
from nulldle.services.game_service import initialize_game_service
from nulldle.services.kv_store import InMemoryKeyValueStore, MongoKeyValueStore
from nulldle.services.stats_service import initialize_stats_service
from nulldle.utils.game_logger import game_logger


def load_dictionary(path: str) -> Dictionary:
    """Loads the word list, refusing to start with an empty one."""
    dictionary = Dictionary.load(path)
    if len(dictionary) == 0:
        raise LoadError(f"Word list {path!r} contains no 5-letter words")
    return dictionary


def create_stats_store(config=Config):
    """MongoDB when configured, otherwise an in-memory store."""
    if not config.MONGO_URI:
        print("✗ MongoDB URI not configured - statistics are kept in memory")
        return InMemoryKeyValueStore()

    try:
        store = MongoKeyValueStore.connect(config.MONGO_URI, config.MONGO_DB_NAME, config.STATS_COLLECTION)
        print("✓ Connected to MongoDB for statistics")
        return store
    except Exception as e:
        # The game stays playable without durable statistics
        print(f"✗ MongoDB connection error: {e} - statistics are kept in memory")
        game_logger.logger.error(f"MongoDB connection error: {e}")
        return InMemoryKeyValueStore()


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        try:
            dictionary = load_dictionary(Config.WORD_LIST_PATH)
        except LoadError as e:
            game_logger.logger.error(f"Failed to load word list: {e}")
            print("Unable to start: the word list could not be loaded.")
            sys.exit(1)
        print(f"✓ Word list loaded: {len(dictionary)} words")

        stats_service = initialize_stats_service(create_stats_store(), Config.LEADERBOARD_SIZE)
        print("✓ Stats service initialized successfully")

        initialize_game_service(dictionary, stats_service)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Nulldle Server Starting")

        print(f"\nStarting Nulldle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Nulldle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
