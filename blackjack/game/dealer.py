"""Dealer policy: the initial deal and the dealer's draw."""

import logging

from blackjack.cards import Deck
from blackjack.hand import Hand
from blackjack.rules import DEALER_STAND_THRESHOLD

logger = logging.getLogger(__name__)


def deal_initial_hands(deck: Deck) -> tuple[Hand, Hand, Deck]:
    """
    Deal the opening layout.

    Two-then-two: the first two cards go to the player, the next two to the
    dealer.

    Returns:
        (player_hand, dealer_hand, remaining_deck)
    """
    player_hand = Hand()
    dealer_hand = Hand()
    for _ in range(2):
        card, deck = deck.deal_top()
        player_hand = player_hand.add_card(card)
    for _ in range(2):
        card, deck = deck.deal_top()
        dealer_hand = dealer_hand.add_card(card)

    logger.debug("Dealt player %r, dealer %r", player_hand, dealer_hand)
    return player_hand, dealer_hand, deck


def draw_until_threshold(
    dealer_hand: Hand,
    deck: Deck,
    threshold: int = DEALER_STAND_THRESHOLD,
) -> tuple[Hand, Deck]:
    """
    Dealer draws while the plain hand value is below the threshold.

    Aces count 1 here; the alternate total is not considered.
    """
    while dealer_hand.value < threshold:
        card, deck = deck.deal_top()
        dealer_hand = dealer_hand.add_card(card)
        logger.debug("Dealer draws %s (value %d)", card, dealer_hand.value)
    return dealer_hand, deck
