"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from wordle_engine import create_app
from wordle_engine.config import Config
from wordle_engine.exceptions import WordSourceError
from wordle_engine.services.game_service import initialize_game_service
from wordle_engine.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # A missing or unusable word list is fatal: no game could ever start
        try:
            game_service = initialize_game_service(
                word_length=Config.WORD_LENGTH,
                max_attempts=Config.MAX_ATTEMPTS,
                words_file=Config.WORDS_FILE
            )
        except WordSourceError as config_error:
            print(f"✗ Word list validation failed: {config_error}")
            game_logger.logger.error(f"Word list validation failed: {config_error}")
            raise SystemExit(1)

        print("✓ Game service initialized successfully")
        print(f"  {len(game_service.word_source.common)} common words, "
              f"{len(game_service.word_source.extended)} extended words")

        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Wordle Server Starting - {Config.WORD_LENGTH} letters, {Config.MAX_ATTEMPTS} attempts"
        )

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        # Start the server
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
