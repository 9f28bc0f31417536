"""
Built-in catalog - zero-capital business blueprints and lookup tables.

Each blueprint entry:
  id                : stable identifier (kebab-case)
  required_skills   : direct fit, matched against single preference tokens
  supportive_skills : transferable fit
  suitable_interests: topics that keep the founder energized
  target_audiences  : communities the plan sells into
  time_commitment   : micro | part-time | full-time
  growth_styles     : first entry is the primary style

Skill, interest and audience labels are single tokens: preference text is
split on whitespace and punctuation, so a two-word label could never match.

All data here is plain Python; load_catalog() validates it.
"""

TIME_COMMITMENT_LABELS: dict[str, str] = {
    "micro": "1-4 hrs/week",
    "part-time": "5-15 hrs/week",
    "full-time": "16+ hrs/week",
}

GROWTH_STYLE_LABELS: dict[str, str] = {
    "community": "Community-led",
    "content": "Content flywheel",
    "partnerships": "Partnership leverage",
    "productized": "Productized service",
    "automation": "Automation loops",
}

GOAL_PLAYBOOKS: dict[str, dict] = {
    "income": {
        "headline": "Cashflow sprint",
        "focus_points": [
            "Pre-sell a fixed-scope offer before building anything.",
            "Price on outcomes and ask for payment upfront.",
            "Reuse every deliverable as a template for the next client.",
        ],
    },
    "audience": {
        "headline": "Attention first",
        "focus_points": [
            "Publish on a fixed weekly cadence in one channel.",
            "Feature other people so they share your work.",
            "Collect emails from day one; own the list.",
        ],
    },
    "credibility": {
        "headline": "Proof-of-work loop",
        "focus_points": [
            "Run a free pilot in exchange for a public case study.",
            "Document the process openly as you deliver it.",
            "Turn repeat questions into a signature framework.",
        ],
    },
    "automation": {
        "headline": "Systems leverage",
        "focus_points": [
            "Map the manual workflow before touching any tool.",
            "Automate intake and reporting with free-tier software.",
            "Productize the repeatable 80% and sell it async.",
        ],
    },
}

GOAL_PRESETS: dict[str, dict] = {
    "income": {
        "label": "Fast cashflow",
        "description": "Ship results quickly with proof-of-value offers.",
        "example": "ex: research, operations, automation, done-for-you",
    },
    "audience": {
        "label": "Audience leverage",
        "description": "Earn attention before monetization kicks in.",
        "example": "ex: newsletter, roundup, community spotlight",
    },
    "credibility": {
        "label": "Proof-of-work",
        "description": "Build reputation that unlocks premium gigs.",
        "example": "ex: playbooks, facilitation, portfolio labs",
    },
    "automation": {
        "label": "Systems leverage",
        "description": "Focus on workflows that scale with minimal time.",
        "example": "ex: async studios, no-code automation, scouting",
    },
}

STRATEGIC_ANGLES: list[str] = [
    "Audit existing relationships for first wins.",
    "Package outcomes, not hours: define a signature offer.",
    "Capture testimonials and case studies within two weeks.",
    "Ship public assets weekly to build compounding trust.",
    "Automate intake, onboarding, and reporting from day one.",
]

DIAGNOSTIC_QUESTIONS: list[str] = [
    "What do friends and colleagues already ask you for help with?",
    "Which problem have you solved for yourself that others still struggle with?",
    "Which communities would answer your message within a day?",
    "What work would you happily do for free for a month?",
    "Which tools or workflows do you know better than most people around you?",
]

BLUEPRINTS: list[dict] = [
    {
        "id": "research-concierge",
        "title": "Research Concierge",
        "headline": "Deliver decision-ready briefs for busy founders.",
        "description": (
            "Turn your research habit into a paid service: market scans, competitor "
            "teardowns, and vendor comparisons delivered as crisp one-pagers."
        ),
        "required_skills": ["Research", "Writing", "Analysis"],
        "supportive_skills": ["Notion", "Operations", "Interviewing"],
        "suitable_interests": ["Startups", "Technology", "Strategy"],
        "target_audiences": ["Founders", "Investors", "Agencies"],
        "time_commitment": "part-time",
        "growth_styles": ["productized", "partnerships"],
        "revenue_streams": [
            "Fixed-price research sprints",
            "Monthly insight retainer",
            "Paid template library",
        ],
        "no_cash_tactics": [
            "Offer one free brief to a founder with a large network",
            "Post anonymized teardown threads weekly",
        ],
        "launch_steps": [
            "Pick one research format and publish a sample brief.",
            "DM ten founders with a tailored teaser.",
            "Close two paid sprints and collect testimonials.",
            "Raise prices after the third delivery.",
        ],
        "scale_angles": [
            "Hire junior researchers on a revenue share.",
            "Bundle briefs into an industry report.",
        ],
        "value_props": [
            "Founders buy back hours of scattered googling.",
            "Outputs are tangible and easy to forward.",
        ],
        "differentiation": "Decision-ready briefs instead of raw link dumps",
    },
    {
        "id": "community-roundup",
        "title": "Community Roundup Newsletter",
        "headline": "Curate the best of a niche every week.",
        "description": (
            "Become the trusted filter for a scattered community by rounding up "
            "launches, jobs, and conversations into one weekly email."
        ),
        "required_skills": ["Writing", "Curation"],
        "supportive_skills": ["Design", "Research", "Networking"],
        "suitable_interests": ["Newsletters", "Community", "Creators"],
        "target_audiences": ["Creators", "Makers", "Students"],
        "time_commitment": "micro",
        "growth_styles": ["content", "community"],
        "revenue_streams": [
            "Sponsored slots",
            "Paid job board listings",
            "Premium deep-dive issue",
        ],
        "no_cash_tactics": [
            "Launch on a free newsletter platform",
            "Swap shout-outs with adjacent newsletters",
            "Feature members so they share each issue",
        ],
        "launch_steps": [
            "Choose a niche you already follow daily.",
            "Ship issue #1 to twenty hand-picked readers.",
            "Ask every featured person to share the issue.",
        ],
        "scale_angles": [
            "Spin off a paid community for subscribers.",
            "Sell an annual sponsor package.",
        ],
        "value_props": [
            "Readers save hours of scrolling.",
            "Every issue grows your network.",
        ],
        "differentiation": "A trusted weekly filter for a scattered niche",
    },
    {
        "id": "no-code-ops-studio",
        "title": "No-Code Ops Studio",
        "headline": "Automate the busywork small teams hate.",
        "description": (
            "Build workflows with free-tier tools that remove manual copy-paste "
            "from intake, invoicing, and reporting for small businesses."
        ),
        "required_skills": ["Automation", "No-code", "Operations"],
        "supportive_skills": ["Spreadsheets", "Documentation", "Support"],
        "suitable_interests": ["Productivity", "Technology", "Systems"],
        "target_audiences": ["Agencies", "Freelancers", "Retailers"],
        "time_commitment": "part-time",
        "growth_styles": ["automation", "productized"],
        "revenue_streams": [
            "Workflow setup packages",
            "Maintenance retainer",
            "Template marketplace sales",
            "Team training sessions",
        ],
        "no_cash_tactics": [
            "Build on free tiers of automation tools",
            "Record a loom teardown of a prospect's workflow",
            "Trade a first build for a referral introduction",
        ],
        "launch_steps": [
            "Automate one of your own recurring chores publicly.",
            "Offer a free workflow audit to five local businesses.",
            "Convert audits into fixed-price builds.",
        ],
        "scale_angles": [
            "Turn popular builds into sellable templates.",
            "Partner with software vendors as an implementation expert.",
        ],
        "value_props": [
            "Saved hours are easy to quantify.",
            "Retainers follow naturally once systems run.",
        ],
        "differentiation": "Workflows that keep running after the handoff",
    },
    {
        "id": "portfolio-lab",
        "title": "Portfolio Lab",
        "headline": "Help career switchers ship proof-of-work projects.",
        "description": (
            "Run small cohorts where career switchers build real portfolio pieces "
            "with feedback, turning your expertise into credibility for them and you."
        ),
        "required_skills": ["Coaching", "Facilitation"],
        "supportive_skills": ["Design", "Writing", "Mentoring"],
        "suitable_interests": ["Education", "Careers", "Community"],
        "target_audiences": ["Students", "Switchers", "Bootcamps"],
        "time_commitment": "part-time",
        "growth_styles": ["community", "content"],
        "revenue_streams": [
            "Cohort tuition",
            "One-to-one portfolio reviews",
        ],
        "no_cash_tactics": [
            "Host the first cohort on free video calls",
            "Publish participant projects as social proof",
        ],
        "launch_steps": [
            "Run a free two-week pilot with five participants.",
            "Publish every finished project with permission.",
            "Open a paid cohort to the pilot's waitlist.",
        ],
        "scale_angles": [
            "Certify alumni as peer mentors.",
            "License the curriculum to bootcamps.",
        ],
        "value_props": [
            "Participants leave with tangible proof.",
            "Alumni become your marketing.",
        ],
        "differentiation": "Real shipped projects instead of course certificates",
    },
    {
        "id": "local-maker-marketplace",
        "title": "Local Maker Pop-Up Broker",
        "headline": "Connect local makers with venues that need foot traffic.",
        "description": (
            "Broker pop-up markets between makers and cafes, coworking spaces, or "
            "offices, taking a commission without holding any inventory."
        ),
        "required_skills": ["Sales", "Networking", "Organizing"],
        "supportive_skills": ["Photography", "Negotiation", "Events"],
        "suitable_interests": ["Food", "Crafts", "Local"],
        "target_audiences": ["Makers", "Cafes", "Retailers"],
        "time_commitment": "full-time",
        "growth_styles": ["partnerships", "community"],
        "revenue_streams": [
            "Venue booking commission",
            "Maker stall fees",
            "Sponsored market days",
        ],
        "no_cash_tactics": [
            "Use venues' existing space and furniture",
            "Pre-sell stalls before confirming the date",
            "Let makers cross-promote to their followers",
        ],
        "launch_steps": [
            "Sign one venue willing to host a trial market.",
            "Recruit eight makers with a pre-paid stall fee.",
            "Document the event and pitch the next venue.",
        ],
        "scale_angles": [
            "Run a recurring monthly circuit.",
            "Sell corporate holiday markets.",
        ],
        "value_props": [
            "Venues gain foot traffic for free.",
            "Makers reach buyers without rent.",
        ],
        "differentiation": "A venue network no single maker could build alone",
    },
    {
        "id": "async-content-studio",
        "title": "Async Content Studio",
        "headline": "Repurpose one expert interview into a month of content.",
        "description": (
            "Interview experts once, then turn the recording into posts, threads, "
            "and newsletters they approve asynchronously."
        ),
        "required_skills": ["Editing", "Writing", "Interviewing"],
        "supportive_skills": ["Video", "Storytelling", "Design"],
        "suitable_interests": ["Creators", "Marketing", "Media"],
        "target_audiences": ["Consultants", "Coaches", "Founders"],
        "time_commitment": "part-time",
        "growth_styles": ["content", "automation"],
        "revenue_streams": [
            "Monthly content retainer",
            "Per-interview packages",
            "Ghostwriting add-ons",
        ],
        "no_cash_tactics": [
            "Record on free video-call tools",
            "Produce a free sample from a public podcast",
            "Use free-tier transcription",
        ],
        "launch_steps": [
            "Repurpose a public interview as a sample pack.",
            "Send it to the interviewee with a retainer offer.",
            "Standardize your production checklist.",
        ],
        "scale_angles": [
            "Train editors on your checklist.",
            "Offer white-label production to agencies.",
        ],
        "value_props": [
            "Experts stay visible with one hour a month.",
            "Deliverables compound in search.",
        ],
        "differentiation": "One hour of expert time becomes a month of content",
    },
    {
        "id": "partnership-scout",
        "title": "Partnership Scout",
        "headline": "Find and broker co-marketing deals for small brands.",
        "description": (
            "Match complementary brands for bundles, newsletter swaps, and joint "
            "webinars, earning a finder's fee on every closed partnership."
        ),
        "required_skills": ["Networking", "Negotiation"],
        "supportive_skills": ["Research", "Sales", "Writing"],
        "suitable_interests": ["Ecommerce", "Marketing", "Startups"],
        "target_audiences": ["Brands", "Retailers", "Creators"],
        "time_commitment": "micro",
        "growth_styles": ["partnerships"],
        "revenue_streams": [
            "Finder's fees",
            "Revenue share on bundles",
        ],
        "no_cash_tactics": [
            "Pitch using public brand data",
            "Offer the first match on success-only terms",
        ],
        "launch_steps": [
            "List twenty brands sharing one customer profile.",
            "Propose three pairings with a one-page rationale.",
            "Close the first deal on a success fee.",
        ],
        "scale_angles": [
            "Build a curated partner directory.",
            "Package recurring partnership programs.",
        ],
        "value_props": [
            "Brands reach new customers without ad spend.",
            "Success-only pricing removes buyer risk.",
        ],
        "differentiation": "Warm introductions priced on results",
    },
    {
        "id": "playbook-publisher",
        "title": "Playbook Publisher",
        "headline": "Package your know-how into paid playbooks.",
        "description": (
            "Document a process you have mastered as a step-by-step playbook with "
            "templates, then sell it alongside optional implementation calls."
        ),
        "required_skills": ["Documentation", "Writing", "Teaching"],
        "supportive_skills": ["Design", "Operations", "Facilitation"],
        "suitable_interests": ["Education", "Productivity", "Careers"],
        "target_audiences": ["Freelancers", "Managers", "Switchers"],
        "time_commitment": "micro",
        "growth_styles": ["content", "productized"],
        "revenue_streams": [
            "Playbook sales",
            "Implementation calls",
            "Team licenses",
        ],
        "no_cash_tactics": [
            "Pre-sell the playbook from an outline",
            "Share chapters as free posts",
        ],
        "launch_steps": [
            "Outline the process you get asked about most.",
            "Pre-sell to your network at a founding price.",
            "Write the playbook with buyers' questions in mind.",
        ],
        "scale_angles": [
            "Add a cohort version.",
            "Sell team licenses to companies.",
        ],
        "value_props": [
            "Buyers skip years of trial and error.",
            "Written once, sold indefinitely.",
        ],
        "differentiation": "Field-tested steps with templates included",
    },
]
