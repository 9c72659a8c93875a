# Compound Protocol mainnet addresses
COMPTROLLER = "0x3d9819210A31b4961b30EF54bE2aeD79B9c9Cd3B"
PRICE_FEED = "0x922018674c12a7F0D394ebEEf9B58F186CdE13c1"
CETH = "0x4Ddc2D193948926D02f9B1fE9e1daa0718270ED5"  # Compound's cETH token
CWBTC = "0xC11b1268C1A384e55C48c2391d8d480264A3A7F4"  # Compound's cWBTC token
WBTC = "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599"  # WBTC token

WBTC_DECIMALS = 8

COMPOUND_ADDRESSES = {
    "COMPTROLLER": COMPTROLLER,
    "PRICE_FEED": PRICE_FEED,
    "CETH": CETH,
    "CWBTC": CWBTC,
    "WBTC": WBTC,
}
