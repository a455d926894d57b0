"""
Catalogue des templates de scénarios, regroupés par catégorie.

Un template est une fonction pure `(company) -> Scenario` : il lit l'état
courant (budget, trimestre) pour construire un scénario complet.  Les
chiffres sont ceux *déclarés* au joueur avant mise à l'échelle de
difficulté (voir `core.scenario_generator`) et avant variance (voir
`core.decision`).

Convention : le `cost` d'une option est informatif, le débit réel est
encodé dans `budget_change` (négatif).
"""

from typing import Callable, Dict, List, Optional

from CEOSim_V1.domain.company import Company
from CEOSim_V1.domain.scenario import DecisionImpact, DecisionOption, Scenario
from CEOSim_V1.domain.types import DepartmentType, RiskLevel, ScenarioCategory

ScenarioTemplate = Callable[[Company], Scenario]

LOW = RiskLevel.LOW
MEDIUM = RiskLevel.MEDIUM
HIGH = RiskLevel.HIGH

ENGINEERING = DepartmentType.ENGINEERING
MARKETING = DepartmentType.MARKETING
HR = DepartmentType.HR


def _option(
    title: str,
    description: str,
    cost: float,
    impact: tuple,
    risk: RiskLevel,
    variance: float,
    target: Optional[DepartmentType] = None,
) -> DecisionOption:
    """Raccourci de saisie : `impact` = (performance, moral, budget, réputation)."""
    perf, morale, budget, reputation = impact
    return DecisionOption(
        title=title,
        description=description,
        cost=cost,
        impact=DecisionImpact(
            performance_change=perf,
            morale_change=morale,
            budget_change=budget,
            reputation_change=reputation,
            department_specific=target,
        ),
        risk_level=risk,
        impact_variance=variance,
    )


def _scenario(
    company: Company,
    category: ScenarioCategory,
    title: str,
    description: str,
    options: List[DecisionOption],
) -> Scenario:
    return Scenario(
        category=category,
        title=title,
        description=description,
        options=options,
        quarter=company.quarter,
    )


# ---------- BUDGET ----------


def budget_shortfall(company: Company) -> Scenario:
    shortfall = int(abs(company.budget * 0.3))
    return _scenario(
        company,
        ScenarioCategory.BUDGET,
        "Budget Shortfall",
        "Unplanned expenses have opened a hole in the budget. Finance is asking "
        f"for immediate action to cover the {shortfall} shortfall.",
        [
            _option(
                "Emergency cost cutting",
                "Cut spending across every department",
                0,
                (-5, -10, company.budget * 0.1, -2),
                HIGH,
                0.35,
            ),
            _option(
                "Seek emergency funding",
                "Take out a short-term business loan",
                1000,
                (0, -2, 25000, -1),
                MEDIUM,
                0.22,
            ),
            _option(
                "Delay payments",
                "Negotiate longer payment terms with suppliers",
                0,
                (-2, -5, 5000, -5),
                LOW,
                0.08,
            ),
        ],
    )


def cash_flow_opportunity(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.BUDGET,
        "Cash Flow Opportunity",
        "A large client offers to prepay a full year of services in exchange "
        "for a 15% discount.",
        [
            _option(
                "Accept the deal",
                "Immediate cash in exchange for lower revenue",
                0,
                (2, 3, company.budget * 0.2, 2),
                HIGH,
                0.40,
            ),
            _option(
                "Counter-offer 10%",
                "Negotiate a smaller discount",
                0,
                (1, 1, company.budget * 0.15, 1),
                MEDIUM,
                0.20,
            ),
            _option(
                "Decline politely",
                "Keep the full pricing structure",
                0,
                (0, 0, 0, 0),
                LOW,
                0.05,
            ),
        ],
    )


def investment_opportunity(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.BUDGET,
        "Investment Opportunity",
        "A venture capital firm wants to invest in the company and offers "
        "substantial funding in exchange for equity.",
        [
            _option(
                "Accept full investment",
                "Large funding round against a significant equity stake",
                0,
                (10, 5, 100000, 8),
                HIGH,
                0.45,
            ),
            _option(
                "Negotiate terms",
                "Smaller round with better equity terms",
                5000,
                (6, 2, 50000, 4),
                MEDIUM,
                0.22,
            ),
            _option(
                "Decline investment",
                "Keep full control of the company",
                0,
                (0, 1, 0, 1),
                LOW,
                0.05,
            ),
        ],
    )


# ---------- TECHNICAL ----------


def system_upgrade(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.TECHNICAL,
        "System Upgrade Required",
        "The platform infrastructure is hitting its capacity limits. An upgrade "
        "is needed to keep service quality acceptable.",
        [
            _option(
                "Enterprise upgrade",
                "Top-tier infrastructure sized for future growth",
                25000,
                (12, 5, -25000, 3),
                HIGH,
                0.35,
                ENGINEERING,
            ),
            _option(
                "Standard upgrade",
                "Enough capacity for current needs",
                12000,
                (7, 2, -12000, 1),
                MEDIUM,
                0.20,
                ENGINEERING,
            ),
            _option(
                "Minimal patches",
                "Temporary fixes to buy some time",
                3000,
                (2, -2, -3000, -1),
                LOW,
                0.08,
                ENGINEERING,
            ),
        ],
    )


def security_vulnerability(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.TECHNICAL,
        "Security Vulnerability",
        "The security team found a possible vulnerability in the student data "
        "systems.",
        [
            _option(
                "Immediate full audit",
                "Complete security review followed by fixes",
                20000,
                (8, 5, -20000, 5),
                HIGH,
                0.38,
                ENGINEERING,
            ),
            _option(
                "Patch critical issues",
                "Fix only the most urgent vulnerabilities",
                8000,
                (4, 2, -8000, 2),
                MEDIUM,
                0.22,
                ENGINEERING,
            ),
            _option(
                "Monitor and assess",
                "Keep watching without acting right away",
                0,
                (-3, -5, 0, -10),
                LOW,
                0.10,
            ),
        ],
    )


def ai_integration(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.TECHNICAL,
        "AI Integration Opportunity",
        "Engineering proposes building AI-driven learning features to get ahead "
        "of competitors in the education market.",
        [
            _option(
                "Full AI investment",
                "Major competitive edge at a high price",
                35000,
                (15, 10, -35000, 8),
                HIGH,
                0.45,
                ENGINEERING,
            ),
            _option(
                "Gradual integration",
                "Steady progress at moderate cost",
                15000,
                (8, 5, -15000, 3),
                MEDIUM,
                0.22,
                ENGINEERING,
            ),
            _option(
                "Wait and watch",
                "No spending now, with the risk of falling behind",
                0,
                (-3, -2, 0, -1),
                LOW,
                0.08,
            ),
        ],
    )


def tech_debt_reckoning(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.TECHNICAL,
        "Tech Debt Reckoning",
        "Engineering wants a one-quarter feature freeze to pay down crippling "
        "tech debt, while Sales warns that three major deals depend on new "
        "features.",
        [
            _option(
                "Full feature freeze",
                "Stop new features and repair the foundation",
                5000,
                (10, -4, -5000, -3),
                HIGH,
                0.38,
                ENGINEERING,
            ),
            _option(
                "50/50 split",
                "Half the team on debt, half on features",
                3000,
                (4, 2, -3000, 0),
                MEDIUM,
                0.22,
            ),
            _option(
                "Features first",
                "Close the deals now and deal with the debt later",
                0,
                (-3, -6, 15000, 2),
                MEDIUM,
                0.28,
            ),
        ],
    )


# ---------- MARKETING ----------


def viral_negative_review(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.MARKETING,
        "Viral Negative Review",
        "A harsh review of the platform has gone viral on social media and is "
        "hurting the company's image.",
        [
            _option(
                "Comprehensive PR campaign",
                "Full damage control and reputation repair",
                15000,
                (5, 0, -15000, 12),
                HIGH,
                0.38,
                MARKETING,
            ),
            _option(
                "Influencer counter-narrative",
                "Work with influencers to share positive stories",
                8000,
                (2, 0, -8000, 7),
                MEDIUM,
                0.25,
                MARKETING,
            ),
            _option(
                "Wait for storm to pass",
                "Let the controversy fade on its own",
                0,
                (-5, -5, 0, -8),
                LOW,
                0.10,
            ),
        ],
    )


def competitor_launch(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.MARKETING,
        "Competitor Launch",
        "A well-funded competitor just launched a similar platform with "
        "aggressive pricing.",
        [
            _option(
                "Price matching campaign",
                "Match their prices and push marketing",
                18000,
                (3, -2, -18000, 4),
                HIGH,
                0.40,
                MARKETING,
            ),
            _option(
                "Feature differentiation",
                "Promote the platform's unique features",
                10000,
                (5, 3, -10000, 3),
                MEDIUM,
                0.22,
                MARKETING,
            ),
            _option(
                "Focus on retention",
                "Invest in existing client relationships",
                5000,
                (2, 2, -5000, 1),
                LOW,
                0.08,
            ),
        ],
    )


def rebranding_initiative(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.MARKETING,
        "Rebranding Initiative",
        "Marketing suggests a full rebrand to reach a younger audience in the "
        "education sector.",
        [
            _option(
                "Complete rebrand",
                "New visual identity and messaging",
                25000,
                (6, 3, -25000, 8),
                HIGH,
                0.42,
                MARKETING,
            ),
            _option(
                "Gradual refresh",
                "Update brand elements step by step",
                10000,
                (3, 2, -10000, 3),
                MEDIUM,
                0.20,
                MARKETING,
            ),
            _option(
                "Keep current brand",
                "Stay with the existing identity",
                0,
                (0, 0, 0, -1),
                LOW,
                0.05,
            ),
        ],
    )


# ---------- HR ----------


def talent_retention_crisis(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.HR,
        "Talent Retention Crisis",
        "Several key employees are weighing offers from competitors. HR needs "
        "to act to keep them.",
        [
            _option(
                "Competitive salary review",
                "Raise salaries and pay bonuses across the board",
                30000,
                (8, 15, -30000, 2),
                HIGH,
                0.35,
                HR,
            ),
            _option(
                "Enhanced benefits package",
                "Better benefits without touching salaries",
                12000,
                (4, 8, -12000, 1),
                MEDIUM,
                0.22,
                HR,
            ),
            _option(
                "Flexible work arrangements",
                "Allow remote work and flexible hours",
                2000,
                (2, 6, -2000, 1),
                LOW,
                0.08,
                HR,
            ),
        ],
    )


def work_culture_assessment(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.HR,
        "Work Culture Assessment",
        "An employee survey raises concerns about work-life balance and company "
        "culture. HR recommends a response.",
        [
            _option(
                "Culture transformation",
                "Company-wide culture improvement program",
                20000,
                (8, 12, -20000, 3),
                HIGH,
                0.38,
                HR,
            ),
            _option(
                "Targeted improvements",
                "Focused fixes for the specific concerns",
                8000,
                (4, 6, -8000, 1),
                MEDIUM,
                0.20,
                HR,
            ),
            _option(
                "Acknowledge concerns",
                "Thank employees for the feedback and change little",
                1000,
                (0, -2, -1000, 0),
                LOW,
                0.08,
                HR,
            ),
        ],
    )


def talent_acquisition(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.HR,
        "Talent Acquisition",
        "Client demand is growing and the team has to expand. HR has lined up "
        "several recruitment strategies.",
        [
            _option(
                "Premium recruitment",
                "Hire top talent with competitive packages",
                35000,
                (12, 5, -35000, 2),
                HIGH,
                0.40,
                HR,
            ),
            _option(
                "Standard hiring",
                "Hire qualified candidates at market rates",
                18000,
                (6, 2, -18000, 1),
                MEDIUM,
                0.22,
                HR,
            ),
            _option(
                "Internal promotion",
                "Fill the roles by promoting current staff",
                5000,
                (3, 8, -5000, 0),
                LOW,
                0.08,
            ),
        ],
    )


def diversity_inclusion(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.HR,
        "Diversity & Inclusion Initiative",
        "Employee resource groups ask for a formal D&I program with budget, "
        "dedicated staff and public commitments. Some executives question the "
        "cost.",
        [
            _option(
                "Comprehensive D&I program",
                "Dedicated team, training and a public commitment",
                25000,
                (4, 10, -25000, 8),
                MEDIUM,
                0.22,
            ),
            _option(
                "Start with training",
                "Bias training and a review of hiring practices",
                8000,
                (2, 5, -8000, 3),
                LOW,
                0.10,
            ),
            _option(
                "Form a committee",
                "An advisory committee studies the issue first",
                2000,
                (0, -2, -2000, -1),
                LOW,
                0.08,
            ),
        ],
    )


# ---------- OPPORTUNITY ----------


def international_expansion(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.OPPORTUNITY,
        "International Expansion",
        "A local partner offers a way into the European education market.",
        [
            _option(
                "Full partnership",
                "Commit major resources to the expansion",
                45000,
                (12, 8, -45000, 6),
                HIGH,
                0.45,
            ),
            _option(
                "Pilot program",
                "Start with a limited market test",
                15000,
                (5, 3, -15000, 2),
                MEDIUM,
                0.22,
            ),
            _option(
                "Decline opportunity",
                "Stay focused on the domestic market",
                0,
                (0, -1, 0, 0),
                LOW,
                0.05,
            ),
        ],
    )


def strategic_partnership(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.OPPORTUNITY,
        "Strategic Partnership",
        "A major educational publisher proposes integrating the platform with "
        "its content library.",
        [
            _option(
                "Exclusive partnership",
                "Deep integration with exclusive content",
                15000,
                (15, 5, -15000, 10),
                HIGH,
                0.40,
            ),
            _option(
                "Non-exclusive partnership",
                "Flexible deal that leaves room for other partners",
                8000,
                (8, 3, -8000, 5),
                MEDIUM,
                0.20,
            ),
            _option(
                "Decline partnership",
                "Stay independent and build content in-house",
                0,
                (2, 0, 0, 0),
                LOW,
                0.05,
            ),
        ],
    )


def new_product_launch(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.OPPORTUNITY,
        "New Product Launch",
        "The product team has built personalized learning paths. How should "
        "the launch be handled?",
        [
            _option(
                "Full marketing launch",
                "Broad campaign backed by a PR push",
                22000,
                (10, 6, -22000, 8),
                HIGH,
                0.42,
            ),
            _option(
                "Soft launch to beta users",
                "Release to a few customers and gather feedback",
                5000,
                (5, 3, -5000, 3),
                MEDIUM,
                0.22,
            ),
            _option(
                "Internal testing only",
                "Keep testing before any customer release",
                2000,
                (2, 1, -2000, 0),
                LOW,
                0.08,
            ),
        ],
    )


def acquisition_target(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.OPPORTUNITY,
        "Acquisition Target",
        "A struggling competitor with complementary technology could be bought "
        "cheaply, but integrating it will be hard.",
        [
            _option(
                "Acquire and integrate",
                "Buy the company and merge its technology",
                45000,
                (12, -3, -45000, 6),
                HIGH,
                0.45,
            ),
            _option(
                "Acquire team only",
                "Hire their key engineers and let the company close",
                20000,
                (6, 2, -20000, 2),
                MEDIUM,
                0.25,
                ENGINEERING,
            ),
            _option(
                "Pass on the opportunity",
                "Keep growing organically",
                0,
                (0, 0, 0, -1),
                LOW,
                0.05,
            ),
        ],
    )


# ---------- ETHICAL ----------


def data_privacy_dilemma(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.ETHICAL,
        "Data Privacy Dilemma",
        "A partner wants student learning data for research. It could improve "
        "the AI models, but parents never agreed to third-party sharing.",
        [
            _option(
                "Share anonymized data",
                "Remove identifiers and share aggregate patterns",
                5000,
                (6, -3, 10000, -4),
                HIGH,
                0.40,
            ),
            _option(
                "Decline and build in-house",
                "Keep the data internal and build research capacity",
                20000,
                (4, 5, -20000, 6),
                MEDIUM,
                0.25,
            ),
            _option(
                "Seek explicit consent first",
                "Run a consent campaign before sharing anything",
                8000,
                (2, 3, -3000, 4),
                MEDIUM,
                0.20,
            ),
        ],
    )


def whistleblower_report(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.ETHICAL,
        "Whistleblower Report",
        "An employee reports that a senior manager has been inflating the "
        "performance figures sent to the board.",
        [
            _option(
                "Full independent investigation",
                "Bring in external auditors and suspend the manager",
                25000,
                (-5, 4, -25000, 8),
                HIGH,
                0.35,
            ),
            _option(
                "Quiet internal review",
                "Handle it internally with no public disclosure",
                5000,
                (-2, -4, -5000, -3),
                MEDIUM,
                0.30,
            ),
            _option(
                "Dismiss the report",
                "Accept the manager's explanation and move on",
                0,
                (0, -8, 0, -6),
                HIGH,
                0.45,
            ),
        ],
    )


def environmental_shortcut(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.ETHICAL,
        "Environmental Shortcut",
        "The data center provider offers a 40% discount by moving to a region "
        "with lax environmental rules and coal-powered energy.",
        [
            _option(
                "Take the cheap option",
                "Big savings, with backlash if it becomes public",
                0,
                (2, -6, 15000, -8),
                HIGH,
                0.45,
            ),
            _option(
                "Invest in green infrastructure",
                "Move to renewable-powered servers at a premium",
                20000,
                (3, 6, -20000, 10),
                MEDIUM,
                0.22,
            ),
            _option(
                "Stay with current provider",
                "No change, no savings, no risk",
                0,
                (0, 0, 0, 0),
                LOW,
                0.05,
            ),
        ],
    )


# ---------- COMPETITIVE ----------


def hostile_acquisition(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.COMPETITIVE,
        "Hostile Acquisition Attempt",
        "A larger competitor is quietly buying shares and courting board "
        "members about a takeover.",
        [
            _option(
                "Poison pill defense",
                "Anti-takeover measures that dilute the acquirer",
                15000,
                (-3, -5, -15000, 5),
                HIGH,
                0.40,
            ),
            _option(
                "Negotiate a white knight",
                "Find a friendly partner to counter-bid",
                10000,
                (5, 2, 30000, 3),
                HIGH,
                0.45,
            ),
            _option(
                "Open dialogue",
                "Meet the acquirer and hear their plans",
                2000,
                (0, -3, -2000, -2),
                MEDIUM,
                0.25,
            ),
        ],
    )


def price_war(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.COMPETITIVE,
        "Price War",
        "Three competitors have cut their prices in half. Customers are asking "
        "why the platform costs more, and revenue is slipping.",
        [
            _option(
                "Match their prices",
                "Cut prices and absorb the margin hit",
                0,
                (3, -4, -20000, 2),
                HIGH,
                0.38,
            ),
            _option(
                "Premium positioning",
                "Justify the price with quality and new features",
                15000,
                (6, 4, -15000, 5),
                MEDIUM,
                0.25,
            ),
            _option(
                "Freemium model",
                "Free tier with paid premium features",
                10000,
                (4, -2, -10000, 3),
                HIGH,
                0.42,
            ),
        ],
    )


def talent_poaching(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.COMPETITIVE,
        "Talent Poaching",
        "A competitor is offering top engineers a 40% salary premium. Three key "
        "developers already have offers in hand.",
        [
            _option(
                "Counter-offers for everyone",
                "Match the competitor's salaries across engineering",
                35000,
                (5, 8, -35000, 1),
                HIGH,
                0.35,
                ENGINEERING,
            ),
            _option(
                "Retention through equity",
                "Stock options and vesting bonuses for key people",
                10000,
                (3, 5, -10000, 2),
                MEDIUM,
                0.22,
                ENGINEERING,
            ),
            _option(
                "Let them go and hire fresh",
                "Accept the departures and recruit at market rates",
                8000,
                (-6, -8, -8000, -2),
                MEDIUM,
                0.28,
                ENGINEERING,
            ),
        ],
    )


# ---------- INNOVATION ----------


def moonshot_vr(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.INNOVATION,
        "Moonshot VR Project",
        "R&D has a promising VR classroom prototype. The technology is unproven "
        "but could transform remote learning.",
        [
            _option(
                "Go all-in on VR",
                "Fund development and launch of the VR platform",
                50000,
                (18, 10, -50000, 12),
                HIGH,
                0.50,
            ),
            _option(
                "Small pilot program",
                "Trial with three partner schools first",
                15000,
                (6, 5, -15000, 4),
                MEDIUM,
                0.25,
            ),
            _option(
                "Shelve and monitor",
                "File the patent and wait for the market",
                3000,
                (-2, -4, -3000, 0),
                LOW,
                0.08,
            ),
        ],
    )


def strategic_pivot(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.INNOVATION,
        "Strategic Pivot",
        "Corporate training is growing three times faster than K-12 education. "
        "Should the core product pivot?",
        [
            _option(
                "Full pivot to corporate",
                "Drop K-12 and rebuild for enterprise customers",
                30000,
                (-8, -6, -30000, -5),
                HIGH,
                0.48,
            ),
            _option(
                "Dual-track approach",
                "Keep K-12 and start a corporate division",
                20000,
                (5, 2, -20000, 3),
                MEDIUM,
                0.25,
            ),
            _option(
                "Double down on K-12",
                "Ignore the trend and strengthen the current market",
                10000,
                (4, 4, -10000, 2),
                LOW,
                0.10,
            ),
        ],
    )


def open_source_gamble(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.INNOVATION,
        "Open Source Gamble",
        "The CTO wants to open-source the core platform to grow a developer "
        "community, which would also help competitors.",
        [
            _option(
                "Open source everything",
                "Release the whole platform with paid enterprise add-ons",
                5000,
                (8, 8, -15000, 10),
                HIGH,
                0.48,
            ),
            _option(
                "Open source non-core tools",
                "Release tools and plugins, keep the platform closed",
                3000,
                (4, 4, -3000, 5),
                MEDIUM,
                0.22,
            ),
            _option(
                "Keep everything proprietary",
                "Protect the intellectual property",
                0,
                (0, -3, 0, -1),
                LOW,
                0.08,
            ),
        ],
    )


def blockchain_credentials(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.INNOVATION,
        "Blockchain Credentials",
        "A blockchain startup offers verifiable digital credentials for the "
        "platform's certifications. Promising, but unproven at scale.",
        [
            _option(
                "Full blockchain integration",
                "Verify every credential on the blockchain",
                25000,
                (10, 5, -25000, 8),
                HIGH,
                0.45,
                ENGINEERING,
            ),
            _option(
                "Limited partnership",
                "Pilot with a single certificate program",
                8000,
                (4, 3, -8000, 3),
                MEDIUM,
                0.25,
                ENGINEERING,
            ),
            _option(
                "Wait for maturity",
                "Not proven enough for education yet",
                0,
                (-1, -2, 0, 0),
                LOW,
                0.08,
            ),
        ],
    )


# ---------- REGULATORY ----------


def accessibility_compliance(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.REGULATORY,
        "Accessibility Compliance",
        "New rules require educational platforms to meet WCAG 2.2 AA within six "
        "months, and the platform has major gaps.",
        [
            _option(
                "Full compliance overhaul",
                "Rebuild the UI to go beyond the standard",
                30000,
                (6, 5, -30000, 8),
                MEDIUM,
                0.22,
                ENGINEERING,
            ),
            _option(
                "Minimum viable compliance",
                "Fix the critical gaps before the deadline",
                12000,
                (2, 0, -12000, 2),
                MEDIUM,
                0.20,
                ENGINEERING,
            ),
            _option(
                "Request extension",
                "Lobby with other companies for more time",
                5000,
                (-2, -3, -5000, -5),
                HIGH,
                0.40,
            ),
        ],
    )


def data_localization(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.REGULATORY,
        "Data Localization Mandate",
        "The EU now requires European student data to be stored on EU servers "
        "by next quarter.",
        [
            _option(
                "Build EU data centers",
                "Invest in dedicated European infrastructure",
                40000,
                (5, 2, -40000, 6),
                HIGH,
                0.35,
            ),
            _option(
                "Partner with EU cloud provider",
                "Host European data with a local provider",
                15000,
                (3, 1, -15000, 3),
                MEDIUM,
                0.22,
            ),
            _option(
                "Exit the EU market",
                "Withdraw from Europe and focus elsewhere",
                0,
                (-4, -5, 5000, -6),
                MEDIUM,
                0.28,
            ),
        ],
    )


def licensing_audit(company: Company) -> Scenario:
    return _scenario(
        company,
        ScenarioCategory.REGULATORY,
        "Licensing Audit",
        "An audit shows several open-source libraries may be used in breach of "
        "their licenses. Legal action is possible.",
        [
            _option(
                "Full license remediation",
                "Audit and replace non-compliant dependencies",
                20000,
                (-3, -2, -20000, 5),
                MEDIUM,
                0.20,
                ENGINEERING,
            ),
            _option(
                "Settle quietly",
                "Pay the license fees and fix the worst cases",
                12000,
                (-1, -3, -12000, -2),
                MEDIUM,
                0.25,
            ),
            _option(
                "Rewrite affected components",
                "Rebuild the affected parts from scratch",
                25000,
                (-5, -6, -25000, 3),
                HIGH,
                0.38,
                ENGINEERING,
            ),
        ],
    )


# ---------- Repli ----------


def fallback_scenario(company: Company) -> Scenario:
    """Scénario générique utilisé quand le pool d'une catégorie est vide."""
    return _scenario(
        company,
        ScenarioCategory.TECHNICAL,
        "System Maintenance",
        "Your IT systems need routine maintenance. How do you proceed?",
        [
            _option(
                "Full maintenance",
                "Comprehensive system overhaul",
                5000,
                (10, 0, -5000, 0),
                LOW,
                0.08,
            ),
            _option(
                "Basic maintenance",
                "Essential updates only",
                2000,
                (5, 0, -2000, 0),
                LOW,
                0.05,
            ),
            _option(
                "Delay maintenance",
                "Postpone maintenance to save money",
                0,
                (-5, 0, 0, 0),
                MEDIUM,
                0.20,
            ),
        ],
    )


SCENARIO_TEMPLATES: Dict[ScenarioCategory, List[ScenarioTemplate]] = {
    ScenarioCategory.BUDGET: [
        budget_shortfall,
        cash_flow_opportunity,
        investment_opportunity,
    ],
    ScenarioCategory.TECHNICAL: [
        system_upgrade,
        security_vulnerability,
        ai_integration,
        tech_debt_reckoning,
    ],
    ScenarioCategory.MARKETING: [
        viral_negative_review,
        competitor_launch,
        rebranding_initiative,
    ],
    ScenarioCategory.HR: [
        talent_retention_crisis,
        work_culture_assessment,
        talent_acquisition,
        diversity_inclusion,
    ],
    ScenarioCategory.OPPORTUNITY: [
        international_expansion,
        strategic_partnership,
        new_product_launch,
        acquisition_target,
    ],
    ScenarioCategory.ETHICAL: [
        data_privacy_dilemma,
        whistleblower_report,
        environmental_shortcut,
    ],
    ScenarioCategory.COMPETITIVE: [
        hostile_acquisition,
        price_war,
        talent_poaching,
    ],
    ScenarioCategory.INNOVATION: [
        moonshot_vr,
        strategic_pivot,
        open_source_gamble,
        blockchain_credentials,
    ],
    ScenarioCategory.REGULATORY: [
        accessibility_compliance,
        data_localization,
        licensing_audit,
    ],
}
