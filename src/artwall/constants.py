"""
Protocol constants for the Spotify MPRIS service and KDE Plasma shell.

These strings must match what the player and the shell register on the
session bus, so they are reproduced verbatim.
"""

DBUS_SERVICE = "org.freedesktop.DBus"
DBUS_PATH = "/org/freedesktop/DBus"
DBUS_INTERFACE = "org.freedesktop.DBus"
DBUS_PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"

PLAYER_SERVICE = "org.mpris.MediaPlayer2.spotify"
PLAYER_PATH = "/org/mpris/MediaPlayer2"
PLAYER_INTERFACE = "org.mpris.MediaPlayer2.Player"
PLAYER_METADATA_PROPERTY = "Metadata"
PLAYER_METADATA_URL_KEY = "xesam:url"

OEMBED_URL_TEMPLATE = "https://open.spotify.com/oembed?url={url}"

PLASMA_SERVICE = "org.kde.plasmashell"
PLASMA_PATH = "/PlasmaShell"
PLASMA_INTERFACE = "org.kde.PlasmaShell"
PLASMA_EVALUATE_METHOD = "evaluateScript"

# %s is replaced with the file:// URI of the artwork
PLASMA_SCRIPT_TEMPLATE = """var allDesktops = desktops();
	for (i=0;i<allDesktops.length;i++) {
		d = allDesktops[i];
		d.wallpaperPlugin = "org.kde.image";
		d.currentConfigGroup = Array("Wallpaper", "org.kde.image", "General");
		d.writeConfig("Image", "%s");
		d.writeConfig("FillMode", 3);
	}"""
