import copy
import unittest

from shenzhen.deal import DECK_SIZE, deal_board, new_deck, new_shuffled_game
from shenzhen.engine import Board, NUM_TRAYS, can_stack_onto
from shenzhen.models import Card, Card_Kind, Dragon_Color, Slot, Suit

BAMBOO = Suit.BAMBOO
CHARACTERS = Suit.CHARACTERS
COIN = Suit.COIN


def n(suit, rank):
    return Card.number(suit, rank)


def cards_accounted_for(board):
    collected = sum(1 for c in board.collected if c)
    return (board.remaining_card_count() + sum(board.out.values())
            + (1 if board.flower else 0) + 4 * collected)


class TestStacking(unittest.TestCase):
    def test_given_number_cards_when_stacking_then_alternate_suit_and_descend(self):
        self.assertTrue(can_stack_onto(n(COIN, 5), n(BAMBOO, 6)))
        self.assertFalse(can_stack_onto(n(COIN, 5), n(COIN, 6)))
        self.assertFalse(can_stack_onto(n(COIN, 5), n(BAMBOO, 7)))
        self.assertFalse(can_stack_onto(n(COIN, 6), n(BAMBOO, 5)))

    def test_given_dragon_or_flower_when_stacking_then_refused(self):
        self.assertFalse(can_stack_onto(Card.dragon(Dragon_Color.RED), n(BAMBOO, 6)))
        self.assertFalse(can_stack_onto(n(COIN, 5), Card.dragon(Dragon_Color.RED)))
        self.assertFalse(can_stack_onto(Card.flower(), n(BAMBOO, 2)))


class TestBoardSlots(unittest.TestCase):
    def test_given_spares_when_checking_appendable_then_only_free_cells_accept(self):
        board = Board()
        card = n(COIN, 5)
        self.assertTrue(board.appendable(Slot.spare(0), card))
        board.spare[0] = n(BAMBOO, 4)
        self.assertFalse(board.appendable(Slot.spare(0), card))
        board.spare[1] = Card.dragon(Dragon_Color.GREEN)
        board.collected[1] = True
        self.assertFalse(board.appendable(Slot.spare(1), card))

    def test_given_trays_when_checking_appendable_then_empty_or_stackable(self):
        board = Board()
        self.assertTrue(board.appendable(Slot.tray(0), Card.dragon(Dragon_Color.WHITE)))
        board.tray[1] = [n(BAMBOO, 6)]
        self.assertTrue(board.appendable(Slot.tray(1), n(COIN, 5)))
        self.assertFalse(board.appendable(Slot.tray(1), n(COIN, 4)))
        self.assertFalse(board.appendable(Slot.tray(1), n(BAMBOO, 5)))

    def test_given_slots_when_reading_then_counts_and_cards_by_depth(self):
        board = Board()
        board.tray[2] = [n(BAMBOO, 6), n(COIN, 5)]
        board.spare[0] = n(CHARACTERS, 3)
        self.assertEqual(board.count_in(Slot.tray(2)), 2)
        self.assertEqual(board.card_at(Slot.tray(2), 0), n(BAMBOO, 6))
        self.assertEqual(board.card_at(Slot.tray(2), 1), n(COIN, 5))
        self.assertIsNone(board.card_at(Slot.tray(2), 2))
        self.assertIsNone(board.card_at(Slot.tray(2), -1))
        self.assertEqual(board.count_in(Slot.spare(0)), 1)
        self.assertEqual(board.card_at(Slot.spare(0), 0), n(CHARACTERS, 3))
        self.assertEqual(board.count_in(Slot.spare(1)), 0)
        self.assertIsNone(board.card_at(Slot.spare(1), 0))

    def test_given_collected_spare_when_reading_then_reports_nothing(self):
        board = Board()
        board.spare[2] = Card.dragon(Dragon_Color.RED)
        board.collected[2] = True
        self.assertEqual(board.count_in(Slot.spare(2)), 0)
        self.assertIsNone(board.card_at(Slot.spare(2), 0))
        with self.assertRaises(IndexError):
            board.remove_top(Slot.spare(2))

    def test_given_misuse_when_removing_or_placing_then_raises(self):
        board = Board()
        with self.assertRaises(IndexError):
            board.remove_top(Slot.spare(0))
        with self.assertRaises(IndexError):
            board.remove_top(Slot.tray(0))
        board.place(Slot.spare(0), n(COIN, 5))
        with self.assertRaises(ValueError):
            board.place(Slot.spare(0), n(COIN, 6))
        self.assertEqual(board.remove_top(Slot.spare(0)), n(COIN, 5))


class TestAutoComplete(unittest.TestCase):
    def test_given_low_cards_exposed_when_auto_completing_then_they_chain_out(self):
        board = Board()
        board.tray[0] = [n(COIN, 2), n(COIN, 1)]
        board.spare[1] = n(BAMBOO, 1)
        board.auto_complete()
        self.assertEqual(board.tray[0], [])
        self.assertIsNone(board.spare[1])
        self.assertEqual(board.out[COIN], 2)
        self.assertEqual(board.out[BAMBOO], 1)

    def test_given_higher_card_when_other_suits_lag_then_it_stays(self):
        board = Board()
        board.out[COIN] = 2
        board.out[BAMBOO] = 1
        board.tray[0] = [n(COIN, 3)]
        board.auto_complete()
        self.assertEqual(board.tray[0], [n(COIN, 3)])
        board.out[CHARACTERS] = 2
        board.out[BAMBOO] = 2
        board.auto_complete()
        self.assertEqual(board.tray[0], [])
        self.assertEqual(board.out[COIN], 3)

    def test_given_exposed_flower_when_auto_completing_then_flower_played(self):
        board = Board()
        board.tray[4] = [n(BAMBOO, 7), Card.flower()]
        board.auto_complete()
        self.assertTrue(board.flower)
        self.assertEqual(board.tray[4], [n(BAMBOO, 7)])

    def test_given_nothing_eligible_when_auto_completing_twice_then_no_change(self):
        board = Board()
        board.tray[0] = [n(BAMBOO, 9), Card.dragon(Dragon_Color.WHITE)]
        before = copy.deepcopy(board)
        board.auto_complete()
        board.auto_complete()
        self.assertEqual(board, before)


class TestCollectDragon(unittest.TestCase):
    def test_given_four_exposed_dragons_when_collecting_then_first_free_spare_collected(self):
        board = Board()
        for i in range(4):
            board.tray[i] = [n(BAMBOO, 9), Card.dragon(Dragon_Color.GREEN)]
        board.spare[0] = n(COIN, 7)
        self.assertTrue(board.collect_dragon(Dragon_Color.GREEN))
        self.assertTrue(board.collected[1])
        self.assertEqual(board.spare[0], n(COIN, 7))
        for i in range(4):
            self.assertEqual(board.tray[i], [n(BAMBOO, 9)])
        self.assertEqual(cards_accounted_for(board), 4 + 4 + 1)

    def test_given_dragon_in_spare_and_no_free_spare_when_collecting_then_uses_that_spare(self):
        board = Board()
        board.spare = [n(COIN, 7), Card.dragon(Dragon_Color.RED), n(BAMBOO, 8)]
        for i in range(3):
            board.tray[i] = [Card.dragon(Dragon_Color.RED)]
        self.assertTrue(board.collect_dragon(Dragon_Color.RED))
        self.assertEqual(board.collected, [False, True, False])
        self.assertEqual(board.tray[:3], [[], [], []])

    def test_given_buried_dragon_when_collecting_then_fails_without_change(self):
        board = Board()
        for i in range(3):
            board.tray[i] = [Card.dragon(Dragon_Color.WHITE)]
        board.tray[3] = [Card.dragon(Dragon_Color.WHITE), n(COIN, 6)]
        before = copy.deepcopy(board)
        self.assertFalse(board.collect_dragon(Dragon_Color.WHITE))
        self.assertEqual(board, before)

    def test_given_no_free_spare_when_collecting_then_fails_without_change(self):
        board = Board()
        board.spare = [n(COIN, 7), n(COIN, 8), n(BAMBOO, 8)]
        for i in range(4):
            board.tray[i] = [Card.dragon(Dragon_Color.GREEN)]
        before = copy.deepcopy(board)
        self.assertFalse(board.collect_dragon(Dragon_Color.GREEN))
        self.assertEqual(board, before)


class TestDeal(unittest.TestCase):
    def test_given_new_deck_when_counting_then_forty_cards_of_each_kind(self):
        deck = new_deck()
        self.assertEqual(len(deck), DECK_SIZE)
        self.assertEqual(sum(1 for c in deck if c.kind == Card_Kind.NUMBER), 27)
        self.assertEqual(sum(1 for c in deck if c.kind == Card_Kind.DRAGON), 12)
        self.assertEqual(sum(1 for c in deck if c.kind == Card_Kind.FLOWER), 1)
        for color in Dragon_Color:
            self.assertEqual(sum(1 for c in deck if c.is_dragon(color)), 4)

    def test_given_deck_when_dealing_then_five_cards_per_tray(self):
        board = deal_board(new_deck())
        self.assertEqual([len(column) for column in board.tray], [5] * NUM_TRAYS)

    def test_given_seed_when_dealing_then_reproducible_and_all_cards_accounted(self):
        a = new_shuffled_game(seed=42)
        b = new_shuffled_game(seed=42)
        self.assertEqual(a, b)
        self.assertEqual(cards_accounted_for(a), DECK_SIZE)

    def test_given_empty_board_when_counting_remaining_then_zero(self):
        self.assertEqual(Board().remaining_card_count(), 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
