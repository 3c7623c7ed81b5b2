"""Canned analytics for the insights page: static chart series and a keyword-matched chat."""

from typing import List

from schemas.insights import ChartSeries, ChatGreeting

CHART_SERIES = [
    ChartSeries(key="sample", chart_type="line", label="Sample Data",
                labels=["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
                data=[12, 19, 3, 5, 2, 3]),
    ChartSeries(key="sales", chart_type="line", label="Monthly Sales",
                labels=["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
                data=[65, 59, 80, 81, 56, 55]),
    ChartSeries(key="customers", chart_type="pie", label="Customer Distribution",
                labels=["New", "Returning", "Inactive"],
                data=[300, 450, 100]),
    ChartSeries(key="products", chart_type="bar", label="Revenue by Category",
                labels=["Electronics", "Clothing", "Books", "Food"],
                data=[4000, 3000, 2000, 1000]),
    ChartSeries(key="growth", chart_type="line", label="Growth Rate (%)",
                labels=["Q1", "Q2", "Q3", "Q4"],
                data=[10, 15, 8, 12]),
]

SUGGESTED_QUERIES = {
    "top-n": "What are our top performing categories?",
    "simulation": "Simulate a 10% increase in sales",
    "improvement": "How can we improve our business?",
}

GREETING = ChatGreeting(
    content="Hello! I'm your AI assistant. I can help you with:",
    capabilities=[
        "Top-N analysis of your data",
        "Sales and performance simulations",
        "Business intelligence suggestions",
        "Custom data visualizations",
    ],
    suggestions=SUGGESTED_QUERIES,
)

# Checked in order; the first keyword found in the lowercased message wins
CANNED_REPLIES = [
    (("top",),
     "Based on the data, Electronics is our top-performing category with $4,000 in revenue."),
    (("sales",),
     "Sales peaked in March-April, showing a 25% increase from February."),
    (("improve",),
     "To improve sales, consider:\n"
     "1. Focus on returning customers (60% of base)\n"
     "2. Expand electronics category\n"
     "3. Target Q2 for promotions (highest growth rate)"),
    (("simulation", "simulate"),
     "Running a 10% sales increase simulation...\n"
     "Projected Revenue: $11,550\n"
     "Growth Impact: +15% customer retention"),
]

FALLBACK_REPLY = ("I can help you with sales analysis, customer insights, and business improvements. "
                  "Try asking about these topics!")


def chart_series() -> List[ChartSeries]:
    return list(CHART_SERIES)


def answer(message: str) -> str:
    text = message.lower()
    for keywords, reply in CANNED_REPLIES:
        if any(keyword in text for keyword in keywords):
            return reply
    return FALLBACK_REPLY
