"""StayPlus: multi-tenant guest services over a Firestore document store."""
