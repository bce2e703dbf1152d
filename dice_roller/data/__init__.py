from dice_roller.data.common_rolls import COMMON_ROLLS, iter_common_rolls, get_category

__all__ = ["COMMON_ROLLS", "iter_common_rolls", "get_category"]
