from backend.engine.gamegenerator.generator import Dice, create_board, roll_die

__all__ = ["Dice", "create_board", "roll_die"]
