from mujinplatformer.shop import CLOSED_X, ITEM_OFFSET, ITEM_SPACING, OPEN_X, Item, Shop


def test_toggle_flips_state():
    shop = Shop()
    assert shop.toggle() is True
    assert shop.toggle() is False
    assert shop.is_open is False


def test_closed_shop_is_hidden():
    shop = Shop()
    shop.update()
    assert shop.x == -1000


def test_open_shop_is_on_screen():
    shop = Shop()
    shop.toggle()
    shop.update()
    assert shop.x == OPEN_X == 0


def test_items_are_laid_out_in_a_row():
    shop = Shop(items=[Item("sword", 10), Item("shield", 20), Item("healthPotion", 5)])
    shop.toggle()
    shop.update()
    xs = [item.x for item in shop.items]
    assert xs[0] == shop.x + ITEM_OFFSET
    assert [b - a for a, b in zip(xs, xs[1:])] == [ITEM_SPACING, ITEM_SPACING]


def test_items_follow_hidden_shop():
    shop = Shop(items=[Item("sword", 10)])
    shop.update()
    assert shop.items[0].x == CLOSED_X + ITEM_OFFSET


def test_item_positions_count():
    shop = Shop()
    assert shop.item_positions(0) == []
    assert len(shop.item_positions(4)) == 4


def test_item_keeps_name_and_price():
    item = Item("sword", 12.5)
    assert (item.id_name, item.price) == ("sword", 12.5)