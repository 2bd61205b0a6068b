"""Tests for the dealer policy."""

import pytest
from hypothesis import given, strategies as st

from blackjack.cards import Deck, random_shuffle
from blackjack.game.dealer import deal_initial_hands, draw_until_threshold
from blackjack.hand import Hand
from blackjack.rules import DEALER_STAND_THRESHOLD


class TestDealInitialHands:
    """Tests for the opening deal."""

    def test_two_then_two(self, stacked, hand_of):
        """The first two cards go to the player, the next two to the dealer."""
        deck = Deck.build(stacked("10S", "7H", "10D", "6C"))
        player, dealer, rest = deal_initial_hands(deck)
        assert player == hand_of("10S", "7H")
        assert dealer == hand_of("10D", "6C")
        assert len(rest) == 48

    def test_consumes_four_cards(self, deck):
        player, dealer, rest = deal_initial_hands(deck)
        dealt = set(player) | set(dealer)
        assert len(dealt) == 4
        assert not dealt & set(rest)
        assert tuple(rest) == deck.cards[4:]


class TestDrawUntilThreshold:
    """Tests for the dealer's draw."""

    def test_threshold_is_17(self):
        assert DEALER_STAND_THRESHOLD == 17

    def test_draws_to_bust(self, stacked, hand_of):
        """Test 16 draws a King and busts."""
        deck = Deck.build(stacked("KC"))
        dealer, rest = draw_until_threshold(hand_of("10D", "6C"), deck)
        assert dealer == hand_of("10D", "6C", "KC")
        assert dealer.is_bust
        assert len(rest) == 51

    def test_stands_at_threshold(self, hand_of, deck):
        """Test 17 draws nothing."""
        dealer, rest = draw_until_threshold(hand_of("10D", "7C"), deck)
        assert dealer == hand_of("10D", "7C")
        assert rest == deck

    def test_soft_total_is_ignored(self, stacked, hand_of):
        """A-7 is plain 8 and keeps drawing."""
        deck = Deck.build(stacked("2S", "9H"))
        dealer, _ = draw_until_threshold(hand_of("AD", "7C"), deck)
        assert dealer == hand_of("AD", "7C", "2S", "9H")
        assert dealer.value == 19

    def test_custom_threshold(self, stacked, hand_of):
        """Test a dealer drawing to 18 hits a hard 17."""
        deck = Deck.build(stacked("3S"))
        dealer, _ = draw_until_threshold(hand_of("10D", "7C"), deck, threshold=18)
        assert dealer.value == 20

    def test_empty_deck_raises(self, hand_of):
        with pytest.raises(IndexError):
            draw_until_threshold(hand_of("2D", "3C"), Deck())

    @given(st.randoms(use_true_random=False))
    def test_draw_result(self, rand):
        """Below-threshold hands draw at least once and end at or above it."""
        deck = Deck.build(random_shuffle(rand))
        first, deck = deck.deal_top()
        second, deck = deck.deal_top()
        start = Hand((first, second))

        dealer, rest = draw_until_threshold(start, deck)

        if start.value < DEALER_STAND_THRESHOLD:
            assert len(dealer) > len(start)
        assert dealer.value >= DEALER_STAND_THRESHOLD or dealer.is_bust
        assert dealer.cards[:2] == start.cards
        assert len(rest) + len(dealer) == 52
