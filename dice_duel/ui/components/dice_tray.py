"""Dice tray component — renders five dice with hold toggles."""

from __future__ import annotations

import streamlit as st


def render_dice_tray(
    dice: tuple[int, ...],
    hold_mask: tuple[bool, ...],
    owner: str,
    can_hold: bool,
    turn_key: str,
) -> set[int]:
    """Render a player's dice, with Hold buttons when holding is allowed.

    Args:
        dice: Current five face values.
        hold_mask: Which dice are currently held.
        owner: ``"human"`` or ``"computer"`` (CSS class and widget keys).
        can_hold: Whether hold buttons should be shown.
        turn_key: Suffix that keeps widget keys unique per roll.

    Returns:
        Set of toggled die indices (empty if nothing changed).
    """
    html_parts = ['<div class="dice-tray">']
    for i, val in enumerate(dice):
        classes = ["die", owner]
        if can_hold and hold_mask[i]:
            classes.append("held")
        html_parts.append(f'<div class="{" ".join(classes)}">{val}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    toggled: set[int] = set()
    if not can_hold:
        return toggled

    cols = st.columns(len(dice))
    for i, col in enumerate(cols):
        with col:
            if hold_mask[i]:
                key = f"{owner}_unhold_{i}_{turn_key}"
                if st.button("Held", key=key, use_container_width=True, type="primary"):
                    toggled.add(i)
            else:
                key = f"{owner}_hold_{i}_{turn_key}"
                if st.button("Hold", key=key, use_container_width=True):
                    toggled.add(i)

    return toggled
