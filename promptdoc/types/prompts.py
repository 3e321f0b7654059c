"""Data records rendered by the system and user prompt templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..schema.fields import doc_field
from .common import Duration, Percentage, Range


@dataclass
class ModelConfig:
    """Model identification."""

    Name: str = doc_field("", json="name", doc="Model name/designation", example="GPT-4")


@dataclass
class MarketConfig:
    """Market and trading environment parameters."""

    Exchange: str = doc_field("", json="exchange", doc="Exchange name", example="Hyperliquid")
    AssetUniverse: str = doc_field(
        "", json="asset_universe", doc="Description of tradeable assets", example="BTC, ETH, SOL"
    )
    StartingCapital: float = doc_field(
        0.0, json="starting_capital", doc="Initial capital in USD", example="10000"
    )
    MarketHours: str = doc_field("", json="market_hours", doc="Trading hours", example="24/7")
    ContractType: str = doc_field(
        "", json="contract_type", doc="Type of contracts", example="Perpetual futures"
    )
    Leverage: Range = doc_field(
        default_factory=Range,
        json="leverage",
        doc="Allowed leverage range",
        example='{"min":1,"max":20}',
    )
    TradingFee: Range = doc_field(
        default_factory=Range,
        json="trading_fee",
        doc="Trading fee percentage range",
        example='{"min":0.02,"max":0.05}',
    )
    Slippage: Range = doc_field(
        default_factory=Range,
        json="slippage",
        doc="Expected slippage percentage range",
        example='{"min":0.1,"max":0.5}',
    )
    MinPositionSize: float = doc_field(
        0.0, json="min_position_size", doc="Minimum position size in USD", example="100"
    )
    MaxPositionConcentration: Percentage = doc_field(
        Percentage(0),
        json="max_position_concentration",
        doc="Maximum % of capital in single position",
        example="30",
    )


@dataclass
class RiskConfig:
    """Risk management parameters."""

    MaxLossPerTrade: Range = doc_field(
        default_factory=Range,
        json="max_loss_per_trade",
        doc="Acceptable loss per trade (% of account)",
        example='{"min":1,"max":3}',
    )
    MinRiskRewardRatio: float = doc_field(
        0.0, json="min_risk_reward_ratio", doc="Minimum reward-to-risk ratio", example="2.5"
    )
    MinLiquidationDistance: Percentage = doc_field(
        Percentage(0),
        json="min_liquidation_distance",
        doc="Minimum distance from liquidation (%)",
        example="20",
    )


@dataclass
class TimingConfig:
    """Decision cadence and data windows."""

    DecisionFrequency: Duration = doc_field(
        default_factory=Duration,
        json="decision_frequency",
        doc="How often to make decisions",
        example='{"value":5,"unit":"minutes"}',
    )
    ShortInterval: Duration = doc_field(
        default_factory=Duration,
        json="short_interval",
        doc="Short-term data interval",
        example='{"value":3,"unit":"minutes"}',
    )
    LongInterval: Duration = doc_field(
        default_factory=Duration,
        json="long_interval",
        doc="Long-term data interval",
        example='{"value":4,"unit":"hours"}',
    )
    RecentDataPointsShort: int = doc_field(
        0,
        json="recent_data_points_short",
        doc="Number of recent short-interval data points",
        example="50",
    )
    RecentDataPointsLong: int = doc_field(
        0,
        json="recent_data_points_long",
        doc="Number of recent long-interval data points",
        example="30",
    )
    FocusRecentPoints: int = doc_field(
        0,
        json="focus_recent_points",
        doc="Number of most recent points to focus on",
        example="3",
    )


@dataclass
class OutputConfig:
    """Response format constraints."""

    CoinSymbols: List[str] = doc_field(
        default_factory=list,
        json="coin_symbols",
        doc="List of tradeable coin symbols",
        example='["BTC","ETH","SOL"]',
    )
    MaxJustificationChars: int = doc_field(
        0,
        json="max_justification_chars",
        doc="Maximum characters in trade justification",
        example="500",
    )


@dataclass
class SystemPromptData:
    """Everything the system prompt template renders."""

    Model: ModelConfig = doc_field(
        default_factory=ModelConfig, json="model", doc="Model configuration"
    )
    Market: MarketConfig = doc_field(
        default_factory=MarketConfig,
        json="market",
        doc="Market and trading environment configuration",
    )
    Risk: RiskConfig = doc_field(
        default_factory=RiskConfig, json="risk", doc="Risk management parameters"
    )
    Timing: TimingConfig = doc_field(
        default_factory=TimingConfig, json="timing", doc="Timing and frequency settings"
    )
    Output: OutputConfig = doc_field(
        default_factory=OutputConfig, json="output", doc="Output format configuration"
    )


@dataclass
class SessionInfo:
    MinutesElapsed: int = doc_field(
        0, json="minutes_elapsed", doc="Minutes since trading started", example="120"
    )


@dataclass
class TimeframeConfig:
    ShortIntervalMinutes: int = doc_field(
        0, json="short_interval_minutes", doc="Short-term interval in minutes", example="3"
    )
    LongIntervalHours: int = doc_field(
        0, json="long_interval_hours", doc="Long-term interval in hours", example="4"
    )


@dataclass
class CurrentSnapshot:
    """Latest market state for one coin."""

    Price: float = doc_field(0.0, json="price", doc="Current price", example="45000.00")
    EMA20: float = doc_field(0.0, json="ema20", doc="20-period EMA", example="44800.00")
    MACD: float = doc_field(0.0, json="macd", doc="MACD indicator", example="150.50")
    RSI7: float = doc_field(0.0, json="rsi7", doc="7-period RSI", example="65.5")


@dataclass
class TimeSeriesData:
    """Indicator series, oldest first."""

    Prices: List[float] = doc_field(
        default_factory=list,
        json="prices",
        doc="Price series (oldest to newest)",
        example="[45000, 45100, 45200]",
    )
    EMA20: List[float] = doc_field(
        default_factory=list,
        json="ema20",
        doc="20-period EMA series",
        example="[44800, 44850, 44900]",
    )
    EMA50: List[float] = doc_field(
        default_factory=list,
        json="ema50",
        doc="50-period EMA series (long-term only)",
        example="[44500, 44550, 44600]",
    )
    MACD: List[float] = doc_field(
        default_factory=list, json="macd", doc="MACD series", example="[150, 155, 160]"
    )
    RSI7: List[float] = doc_field(
        default_factory=list, json="rsi7", doc="7-period RSI series", example="[63, 64, 65]"
    )
    RSI14: List[float] = doc_field(
        default_factory=list, json="rsi14", doc="14-period RSI series", example="[58, 59, 60]"
    )
    ATR3: List[float] = doc_field(
        default_factory=list,
        json="atr3",
        doc="3-period ATR series (long-term only)",
        example="[800, 810, 820]",
    )
    ATR14: List[float] = doc_field(
        default_factory=list,
        json="atr14",
        doc="14-period ATR series (long-term only)",
        example="[750, 760, 770]",
    )


@dataclass
class OpenInterestData:
    Latest: float = doc_field(
        0.0, json="latest", doc="Latest open interest", example="850000000"
    )
    Average: float = doc_field(
        0.0, json="average", doc="Average open interest", example="800000000"
    )


@dataclass
class FuturesMetrics:
    """Perpetual futures metrics for one coin."""

    OpenInterest: OpenInterestData = doc_field(
        default_factory=OpenInterestData, json="open_interest", doc="Open interest data"
    )
    FundingRate: float = doc_field(
        0.0, json="funding_rate", doc="Current funding rate", example="0.0001"
    )
    VolumeCurrent: float = doc_field(
        0.0, json="volume_current", doc="Current volume", example="1500000000"
    )
    VolumeAverage: float = doc_field(
        0.0, json="volume_average", doc="Average volume", example="1200000000"
    )


@dataclass
class CoinData:
    """Market data for a single coin."""

    Symbol: str = doc_field("", json="symbol", doc="Coin symbol", example="BTC")
    Current: CurrentSnapshot = doc_field(
        default_factory=CurrentSnapshot, json="current", doc="Current market snapshot"
    )
    Short: TimeSeriesData = doc_field(
        default_factory=TimeSeriesData, json="short", doc="Short-term time series data"
    )
    Long: TimeSeriesData = doc_field(
        default_factory=TimeSeriesData, json="long", doc="Long-term time series data"
    )
    Futures: FuturesMetrics = doc_field(
        default_factory=FuturesMetrics,
        json="futures",
        doc="Perpetual futures specific metrics",
    )


@dataclass
class PerformanceMetrics:
    ReturnPct: float = doc_field(
        0.0, json="return_pct", doc="Total return percentage", example="5.25"
    )
    SharpeRatio: float = doc_field(0.0, json="sharpe_ratio", doc="Sharpe ratio", example="1.8")


@dataclass
class AccountStatus:
    CashAvailable: float = doc_field(
        0.0, json="cash_available", doc="Available cash in USD", example="8500.00"
    )
    AccountValue: float = doc_field(
        0.0, json="account_value", doc="Total account value in USD", example="10500.00"
    )


@dataclass
class AccountInfo:
    Performance: PerformanceMetrics = doc_field(
        default_factory=PerformanceMetrics, json="performance", doc="Performance metrics"
    )
    Status: AccountStatus = doc_field(
        default_factory=AccountStatus, json="status", doc="Current account status"
    )


@dataclass
class ExitPlan:
    """Exit strategy parameters for a position."""

    ProfitTarget: float = doc_field(
        0.0, json="profit_target", doc="Take profit price", example="48000.00"
    )
    StopLoss: float = doc_field(0.0, json="stop_loss", doc="Stop loss price", example="44000.00")
    InvalidationCondition: str = doc_field(
        "",
        json="invalidation_condition",
        doc="Condition that invalidates the trade",
        example="BTC breaks below $43000",
    )


@dataclass
class PositionData:
    """An open position."""

    Symbol: str = doc_field("", json="symbol", doc="Position symbol", example="BTC")
    Quantity: float = doc_field(0.0, json="quantity", doc="Position quantity", example="0.1")
    EntryPrice: float = doc_field(0.0, json="entry_price", doc="Entry price", example="45000.00")
    CurrentPrice: float = doc_field(
        0.0, json="current_price", doc="Current price", example="46000.00"
    )
    LiquidationPrice: float = doc_field(
        0.0, json="liquidation_price", doc="Liquidation price", example="40000.00"
    )
    UnrealizedPnL: float = doc_field(
        0.0, json="unrealized_pnl", doc="Unrealized profit/loss", example="100.00"
    )
    Leverage: int = doc_field(0, json="leverage", doc="Position leverage", example="5")
    ExitPlan: ExitPlan = doc_field(default_factory=ExitPlan, json="exit_plan", doc="Exit strategy")
    Confidence: float = doc_field(
        0.0, json="confidence", doc="Trade confidence (0-1)", example="0.75"
    )
    RiskUSD: float = doc_field(0.0, json="risk_usd", doc="Risk amount in USD", example="150.00")
    NotionalUSD: float = doc_field(
        0.0, json="notional_usd", doc="Notional value in USD", example="4500.00"
    )


@dataclass
class UserPromptData:
    """Everything the user prompt template renders."""

    Session: SessionInfo = doc_field(
        default_factory=SessionInfo, json="session", doc="Trading session information"
    )
    Timeframes: TimeframeConfig = doc_field(
        default_factory=TimeframeConfig, json="timeframes", doc="Timeframe configuration"
    )
    Coins: List[CoinData] = doc_field(
        default_factory=list, json="coins", doc="Market data for all coins"
    )
    Account: AccountInfo = doc_field(
        default_factory=AccountInfo, json="account", doc="Account status and performance"
    )
    Positions: List[PositionData] = doc_field(
        default_factory=list, json="positions", doc="Current open positions"
    )


__all__ = [
    "AccountInfo",
    "AccountStatus",
    "CoinData",
    "CurrentSnapshot",
    "ExitPlan",
    "FuturesMetrics",
    "MarketConfig",
    "ModelConfig",
    "OpenInterestData",
    "OutputConfig",
    "PerformanceMetrics",
    "PositionData",
    "RiskConfig",
    "SessionInfo",
    "SystemPromptData",
    "TimeSeriesData",
    "TimeframeConfig",
    "TimingConfig",
    "UserPromptData",
]
