"""可拖拽卡片 — 浏览器端跟手移动，松手后把增量回传给服务端累加。"""

from __future__ import annotations

import logging
from typing import Callable

from nicegui import ui

from profile_card.models import CardOffset

logger = logging.getLogger(__name__)

DRAG_EVENT = "card_drag_end"


def transform_css(offset: CardOffset) -> str:
    return f"translate3d({offset.x:g}px, {offset.y:g}px, 0)"


def offset_props(offset: CardOffset) -> str:
    """把已累加的偏移写进 data-x / data-y，浏览器松手时据此先行落位。"""
    return f'data-x="{offset.x:g}" data-y="{offset.y:g}"'


def parse_drag_args(args) -> tuple[float, float] | None:
    """解析 emitEvent 传回的 {dx, dy}，格式不对返回 None。"""
    if isinstance(args, (list, tuple)):
        args = args[0] if args else None
    if not isinstance(args, dict):
        return None
    try:
        return float(args.get("dx", 0)), float(args.get("dy", 0))
    except (TypeError, ValueError):
        return None


class DraggableCard:
    """按住 [data-drag-handle] 拖动整张卡片。"""

    def __init__(self, on_drag_end: Callable[[float, float], CardOffset]):
        self._on_drag_end = on_drag_end
        self._card: ui.element | None = None

    def install(self):
        """每个页面调用一次：注入拖拽脚本并监听回传事件。"""
        ui.add_body_html(f"<script>{_JS_DRAG}</script>")
        ui.on(DRAG_EVENT, self._handle_drag_end)

    def create(self, offset: CardOffset, style: str = "") -> ui.element:
        self._card = ui.element("div").classes("profile-card").style(
            f"position: relative; max-width: 56rem; width: 100%; margin: 0 16px; "
            f"border-radius: 24px; overflow: hidden; z-index: 10; "
            f"box-shadow: 0 25px 50px -12px rgba(0,0,0,0.25); "
            f"transform: {transform_css(offset)}; {style}"
        ).props(offset_props(offset))
        return self._card

    def move_to(self, offset: CardOffset):
        if self._card:
            self._card.props(offset_props(offset))
            self._card.style(add=f"transform: {transform_css(offset)};")

    def _handle_drag_end(self, e):
        delta = parse_drag_args(getattr(e, "args", None))
        if delta is None:
            logger.debug("忽略无法解析的拖拽事件: %r", getattr(e, "args", None))
            return
        offset = self._on_drag_end(*delta)
        self.move_to(offset)


# ---------------------------------------------------------------------------
# 拖拽脚本（内嵌）— 拖动中只改 CSS translate；松手时先把增量并入
# transform 与 data-x/data-y 再清零 translate，服务端回传的值与之相同
# ---------------------------------------------------------------------------

_JS_DRAG = r"""
(function() {
if (window._profileCardDragInit) return;
window._profileCardDragInit = true;

var drag = null;

document.addEventListener('pointerdown', function(ev) {
  var handle = ev.target.closest('[data-drag-handle]');
  if (!handle) return;
  var card = handle.closest('.profile-card');
  if (!card) return;
  drag = {card: card, x: ev.clientX, y: ev.clientY};
  ev.preventDefault();
});

document.addEventListener('pointermove', function(ev) {
  if (!drag) return;
  var dx = ev.clientX - drag.x, dy = ev.clientY - drag.y;
  drag.card.style.translate = dx + 'px ' + dy + 'px';
});

function finish(ev) {
  if (!drag) return;
  var dx = ev.clientX - drag.x, dy = ev.clientY - drag.y;
  var card = drag.card;
  drag = null;
  if (dx !== 0 || dy !== 0) {
    var x = (parseFloat(card.dataset.x) || 0) + dx;
    var y = (parseFloat(card.dataset.y) || 0) + dy;
    card.dataset.x = x;
    card.dataset.y = y;
    card.style.transform = 'translate3d(' + x + 'px, ' + y + 'px, 0)';
  }
  card.style.translate = '';
  if (dx !== 0 || dy !== 0) emitEvent('card_drag_end', {dx: dx, dy: dy});
}

document.addEventListener('pointerup', finish);
document.addEventListener('pointercancel', function() {
  if (!drag) return;
  drag.card.style.translate = '';
  drag = null;
});
})();
"""
