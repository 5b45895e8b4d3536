class Config:
    # Document format
    LEVEL_ROOT_TAG = "supertux-level"
    LEGACY_FORMAT_VERSION = 1
    CURRENT_FORMAT_VERSION = 2
    SECTOR_KEY = "sector"

    # Defaults applied to freshly created levels
    DEFAULT_LICENSE = "CC-BY-SA 4.0 International"
    DEFAULT_TILESET = "images/tiles.strf"
    WORLDMAP_TILESET = "images/worldmap.strf"
    DEFAULT_SECTOR_NAME = "main"

    # File naming
    LEVEL_EXTENSION = ".stl"
    WORLDMAP_EXTENSION = ".stwm"
    LEVEL_BASENAME = "level"
    WORLDMAP_BASENAME = "worldmap"
    LEVEL_DISPLAY_PREFIX = "Level"

    # Sector defaults
    DEFAULT_SECTOR_WIDTH = 100  # tiles
    DEFAULT_SECTOR_HEIGHT = 35  # tiles
    DEFAULT_GRAVITY = 10.0
    DEFAULT_AMBIENT_LIGHT = (1.0, 1.0, 1.0)
    DEFAULT_SPAWN_POINT = (64.0, 480.0)
    LEGACY_SPAWN_POINT = (100.0, 170.0)
    LEGACY_MUSIC_DIR = "music/"
    TILE_SIZE = 32

    # Statistics: object kinds counted towards level totals
    COIN_KINDS = frozenset({"coin", "heavycoin"})
    BADGUY_KINDS = frozenset({
        "angrystone", "bouncingsnowball", "captainsnowball", "dart", "dispenser",
        "fish", "flame", "flyingsnowball", "haywire", "jumpy", "kugelblitz",
        "mole", "mrbomb", "mriceblock", "mrtree", "poisonivy", "skullyhop",
        "smartball", "snail", "snowball", "spiky", "sspiky", "stumpy",
        "toad", "totem", "walkingleaf", "yeti", "zeekling",
    })
    SECRET_KINDS = frozenset({"secretarea"})

    # Translations
    TRANSLATION_DOMAIN = "supertux"
    LOCALE_DIRNAME = "locale"

    # Virtual filesystem root used when no other is given; None means the
    # working directory at the time the filesystem is built
    DEFAULT_DATA_DIR = None
