from enum import Enum


class TokenSymbol(str, Enum):
    """Well-known ERC20 contracts on Ethereum mainnet."""

    BAT = "BAT"      # Basic Attention Token
    BNB = "BNB"      # Binance Token
    BUSD = "BUSD"    # Binance USD
    LINK = "LINK"    # ChainLink
    TUSD = "TUSD"    # TrueUSD
    USDC = "USDC"    # USD Coin
    USDT = "USDT"    # Tether USD
    WBTC = "WBTC"    # Wrapped BTC
    CDAI = "cDAI"    # Compound Dai
    CRO = "CRO"      # Crypto.com Coin
    OKB = "OKB"
    LEO = "LEO"      # Bitfinex LEO Token
    WFIL = "WFIL"    # Wrapped Filecoin
    VEN = "VEN"      # VeChain
    DAI = "DAI"      # Dai Stablecoin
    UNI = "UNI"      # Uniswap
    UNIDENTIFIED = "unidentified"
