"""
Wordle Engine - Game Service Tests
"""

import logging
import threading
from pathlib import Path

import pytest
from conftest import target_of, wrong_guesses
from wordle_engine.services import (
    EmptyVocabularyError, GameAlreadyCompleteError, GameNotFoundError, GameService,
    GameStorage, InvalidGuessLengthError, NotAWordError, WordSource
)


# === Create ===


class TestCreateGame:

    def test_returns_id_of_new_game(self, game_service):
        game_id = game_service.create_game()
        view = game_service.get_game(game_id)
        assert view.game_id == game_id
        assert view.guess_count == 0
        assert view.answer is None

    def test_persists_new_game(self, game_service, storage):
        game_id = game_service.create_game()
        assert [g.game_id for g in storage.load()] == [game_id]

    def test_empty_vocabulary(self, storage):
        service = GameService(WordSource([]), storage)
        with pytest.raises(EmptyVocabularyError):
            service.create_game()
        assert len(service.registry) == 0
        assert storage.load() is None

    def test_works_without_storage(self, word_source):
        service = GameService(word_source)
        assert service.get_game(service.create_game()) is not None


# === Submit guess ===


class TestSubmitGuess:

    def test_appends_and_scores(self, game_service):
        game_id = game_service.create_game()
        guess = wrong_guesses(target_of(game_service, game_id), 1)[0]
        view = game_service.submit_guess(game_id, guess)
        assert view.guesses == [guess]
        assert "".join(cell[0] for cell in view.rows[0]) == guess

    def test_normalizes_input(self, game_service):
        game_id = game_service.create_game()
        guess = wrong_guesses(target_of(game_service, game_id), 1)[0]
        view = game_service.submit_guess(game_id, f"  {guess.upper()} ")
        assert view.guesses == [guess]

    def test_victory(self, game_service):
        game_id = game_service.create_game()
        target = target_of(game_service, game_id)
        view = game_service.submit_guess(game_id, target)
        assert view.is_victory is True
        assert view.is_complete is True
        assert view.answer == target

    def test_loss(self, game_service):
        game_id = game_service.create_game()
        target = target_of(game_service, game_id)
        for guess in wrong_guesses(target, 6):
            view = game_service.submit_guess(game_id, guess)
        assert view.is_loss is True
        assert view.is_victory is False
        assert view.answer == target

    def test_unknown_game(self, game_service):
        with pytest.raises(GameNotFoundError):
            game_service.submit_guess("missing", "crane")

    def test_not_a_word_leaves_game_unchanged(self, game_service):
        game_id = game_service.create_game()
        with pytest.raises(NotAWordError):
            game_service.submit_guess(game_id, "zzzzz")
        assert game_service.get_game(game_id).guesses == []

    def test_non_alphabetic_guess(self, game_service):
        game_id = game_service.create_game()
        with pytest.raises(NotAWordError):
            game_service.submit_guess(game_id, "cr4ne")

    @pytest.mark.parametrize("guess", ["", "cran", "cranes"])
    def test_wrong_length(self, game_service, guess):
        game_id = game_service.create_game()
        with pytest.raises(InvalidGuessLengthError):
            game_service.submit_guess(game_id, guess)
        assert game_service.get_game(game_id).guesses == []

    def test_guess_after_completion(self, game_service):
        game_id = game_service.create_game()
        target = target_of(game_service, game_id)
        game_service.submit_guess(game_id, target)
        with pytest.raises(GameAlreadyCompleteError):
            game_service.submit_guess(game_id, wrong_guesses(target, 1)[0])
        assert game_service.get_game(game_id).guess_count == 1

    def test_guess_is_persisted(self, game_service, storage):
        game_id = game_service.create_game()
        guess = wrong_guesses(target_of(game_service, game_id), 1)[0]
        game_service.submit_guess(game_id, guess)
        assert storage.load()[0].guesses == [guess]

    def test_rejected_guess_is_not_persisted(self, game_service, storage):
        game_id = game_service.create_game()
        with pytest.raises(NotAWordError):
            game_service.submit_guess(game_id, "zzzzz")
        assert storage.load()[0].guesses == []


# === Read operations ===


class TestReadOperations:

    def test_get_unknown_game(self, game_service):
        assert game_service.get_game("missing") is None

    def test_list_games_newest_first(self, game_service):
        ids = [game_service.create_game() for _ in range(3)]
        assert [s.game_id for s in game_service.list_games()] == list(reversed(ids))

    def test_summary_hides_unsolved_answer(self, game_service):
        solved = game_service.create_game()
        game_service.submit_guess(solved, target_of(game_service, solved))
        unsolved = game_service.create_game()
        summaries = {s.game_id: s for s in game_service.list_games()}
        assert summaries[solved].answer == target_of(game_service, solved)
        assert summaries[unsolved].answer is None


# === Persistence ===


class TestPersistence:

    def test_save_failure_keeps_serving(self, word_source, tmp_path, caplog):
        blocked = tmp_path / "blocked"
        blocked.mkdir()
        (blocked / "keep").write_text("x")
        service = GameService(word_source, GameStorage(str(blocked)))

        with caplog.at_level(logging.ERROR, logger='wordle_game'):
            game_id = service.create_game()

        assert service.persistence_ok is False
        assert service.get_game(game_id) is not None
        assert "save_failed" in caplog.text

    def test_save_retried_on_next_change(self, word_source, tmp_path):
        path = tmp_path / "save.json"
        path.mkdir()
        service = GameService(word_source, GameStorage(str(path)))
        first = service.create_game()
        assert service.persistence_ok is False

        path.rmdir()
        second = service.create_game()
        assert service.persistence_ok is True
        saved = {g.game_id for g in GameStorage(str(path)).load()}
        assert saved == {first, second}

    def test_load_saved_games(self, game_service, word_source, storage, clock):
        game_id = game_service.create_game()
        guess = wrong_guesses(target_of(game_service, game_id), 1)[0]
        game_service.submit_guess(game_id, guess)

        restarted = GameService(word_source, GameStorage(storage.path, clock=clock))
        assert restarted.load_saved_games() == 1
        assert restarted.get_game(game_id).guesses == [guess]

    def test_load_without_save_file(self, game_service):
        assert game_service.load_saved_games() == 0
        assert len(game_service.registry) == 0

    def test_load_corrupt_file_starts_empty(self, game_service, save_path, caplog):
        Path(save_path).parent.mkdir(parents=True)
        Path(save_path).write_text("{broken", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger='wordle_game'):
            assert game_service.load_saved_games() == 0
        assert len(game_service.registry) == 0
        assert "load_failed" in caplog.text

    def test_load_record_with_mismatched_guess_starts_empty(self, game_service, save_path):
        Path(save_path).parent.mkdir(parents=True)
        Path(save_path).write_text(
            '{"games": [{"id": "g1", "word": "final", "guesses": ["cranes"]}]}', encoding="utf-8"
        )
        assert game_service.load_saved_games() == 0
        assert game_service.get_game("g1") is None


# === Concurrency ===


class TestConcurrentRequests:

    def test_last_save_holds_newest_state(self, game_service, storage):
        errors = []

        def player():
            try:
                game_id = game_service.create_game()
                target = target_of(game_service, game_id)
                for guess in wrong_guesses(target, 5):
                    game_service.submit_guess(game_id, guess)
                game_service.submit_guess(game_id, target)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=player) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        assert errors == []
        in_memory = sorted(game_service.registry.snapshot(), key=lambda g: g.game_id)
        saved = sorted(storage.load(), key=lambda g: g.game_id)
        assert saved == in_memory
        assert len(saved) == 8
        assert all(game.is_victory and len(game.guesses) == 6 for game in saved)
        assert game_service.persistence_ok is True
