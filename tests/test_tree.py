import random

from gattpath.gatt.handle import AttributeKind, Handle
from gattpath.gatt.tree import CharacteristicNode, DescriptorNode, ServiceNode, build_tree


def test_tree_shape(managed_paths, device_path):
    tree = build_tree(managed_paths)

    assert [s.path for s in tree.services] == [
        f"{device_path}/service0010",
        f"{device_path}/service0025",
    ]
    svc = tree.services[1]
    assert [c.handle.handle for c in svc.characteristics] == [0x26, 0x29]
    assert [d.handle.handle for d in svc.characteristics[0].descriptors] == [0x27, 0x28]
    assert tree.orphans == []


def test_non_attribute_paths_skipped(managed_paths, device_path):
    tree = build_tree(managed_paths)
    assert sorted(tree.skipped) == sorted(["/org/bluez", "/org/bluez/hci0", device_path])


def test_order_independent_of_input(managed_paths):
    expected = build_tree(managed_paths).handles()
    shuffled = list(managed_paths)
    random.Random(7).shuffle(shuffled)
    assert build_tree(shuffled).handles() == expected


def test_handles_in_tree_order(managed_paths):
    handles = build_tree(managed_paths).handles()
    assert handles == [
        Handle(AttributeKind.SERVICE, 0, 0x10),
        Handle(AttributeKind.CHARACTERISTIC, 0x10, 0x11),
        Handle(AttributeKind.SERVICE, 0, 0x25),
        Handle(AttributeKind.CHARACTERISTIC, 0x25, 0x26),
        Handle(AttributeKind.DESCRIPTOR, 0x26, 0x27),
        Handle(AttributeKind.DESCRIPTOR, 0x26, 0x28),
        Handle(AttributeKind.CHARACTERISTIC, 0x25, 0x29),
    ]


def test_orphans_reported(device_path):
    desc_path = f"{device_path}/service0025/char0026/descriptor0027"
    char_path = f"{device_path}/service0030/char0031"
    tree = build_tree([desc_path, char_path, f"{device_path}/service0025"])

    assert sorted(tree.orphans) == sorted([desc_path, char_path])
    assert tree.services[0].characteristics == []


def test_trailing_segments_are_skipped(device_path):
    tree = build_tree([f"{device_path}/service0025", f"{device_path}/service0025/char0026/fd0"])
    assert tree.skipped == [f"{device_path}/service0025/char0026/fd0"]
    assert tree.services[0].characteristics == []


def test_device_filter(device_path):
    other = "/org/bluez/hci0/dev_AA_BB_CC_DD_EE_FF"
    tree = build_tree(
        [f"{device_path}/service0025", f"{other}/service0001", f"{device_path}_77/service0002"],
        device_path=device_path,
    )
    assert [s.path for s in tree.services] == [f"{device_path}/service0025"]


def test_duplicates_collapsed(device_path):
    path = f"{device_path}/service0025"
    tree = build_tree([path, path, path + "/"])
    assert len(tree.services) == 1


def test_find(managed_paths, device_path):
    tree = build_tree(managed_paths)
    assert isinstance(tree.find(f"{device_path}/service0025"), ServiceNode)
    assert isinstance(tree.find(f"{device_path}/service0025/char0029"), CharacteristicNode)
    assert isinstance(tree.find(f"{device_path}/service0025/char0026/descriptor0028"), DescriptorNode)
    assert tree.find(f"{device_path}/service0099") is None


def test_to_dict(device_path):
    svc = f"{device_path}/service0025"
    chr_ = f"{svc}/char0026"
    dsc = f"{chr_}/descriptor0027"
    assert build_tree([dsc, chr_, svc]).to_dict() == {
        "Services": {
            svc: {
                "Handle": 0x25,
                "Characteristics": {
                    chr_: {
                        "Handle": 0x26,
                        "Service": 0x25,
                        "Descriptors": {dsc: {"Handle": 0x27, "Characteristic": 0x26}},
                    }
                },
            }
        },
        "Orphans": [],
        "Skipped": [],
    }


def test_empty_input():
    tree = build_tree([])
    assert tree.services == [] and tree.orphans == [] and tree.skipped == []
