"""CV-driven job recommendation: analyse a stored CV, scrape listings, rank by skill match."""
